from typing import TypedDict, Dict, Any, Optional

class QuestionnaireState(TypedDict, total=False):
    session_id: Optional[str]                 # Session ID for log tracking
    answers: Dict[str, Dict[str, Any]]        # qid -> {"optionId", "value", "text"}
    current_question_index: int
    previous_score: int                       # Score before the last answer
    score: int
    is_complete: bool
    recommended_portfolio: Optional[str]
