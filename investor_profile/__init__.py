# investor_profile package
from .models import AllocationSlice, InvestorProfileAnalysis, InvestorProfileRecord
from .store import ProfileStore, InMemoryProfileStore, save_investment_profile

__all__ = [
    'AllocationSlice',
    'InvestorProfileAnalysis',
    'InvestorProfileRecord',
    'ProfileStore',
    'InMemoryProfileStore',
    'save_investment_profile',
]
