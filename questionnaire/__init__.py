"""
Risk-profiling questionnaire: question catalog, scoring, profile bands,
insights and the per-user session.
"""
