import pytest

from lead_engine.engine import LeadScoringEngine


@pytest.fixture
def engine():
    return LeadScoringEngine(max_workers=2)


@pytest.fixture
def sample_leads():
    return [
        {
            "id": "test-1",
            "job": {"title": "Chief Executive Officer", "company": "TechCorp Inc"},
            "company": {
                "name": "TechCorp Inc",
                "employees": 1500,
                "industry": "Technology",
                "location": "San Francisco, CA",
            },
        },
        {
            "id": "test-2",
            "job": {"title": "Sales Director", "company": "StartupXYZ"},
            "company": {
                "name": "StartupXYZ",
                "employees": 25,
                "industry": "SaaS",
                "location": "Austin, TX",
            },
        },
        {
            "id": "test-3",
            "job": {"title": "Marketing Manager", "company": "MegaCorp"},
            "company": {
                "name": "MegaCorp",
                "employees": 5000,
                "industry": "Manufacturing",
                "location": "Detroit, MI",
            },
        },
        {
            "id": "test-4",
            "job": {"title": "Junior Developer", "company": "DevShop"},
            "company": {
                "name": "DevShop",
                "employees": 8,
                "industry": "Software",
                "location": "Portland, OR",
            },
        },
    ]
