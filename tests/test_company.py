import pytest

from lead_engine.config.settings import COMPANY_TIERS
from lead_engine.models.schemas import CompanyData, CompanyTier
from lead_engine.stages.stage2_company import CompanyStage


@pytest.fixture
def stage():
    return CompanyStage()


@pytest.mark.parametrize(
    "employees,tier,weight",
    [
        (1, CompanyTier.STARTUP, 40),
        (9, CompanyTier.STARTUP, 40),
        (10, CompanyTier.SMALL, 55),
        (49, CompanyTier.SMALL, 55),
        (50, CompanyTier.MEDIUM, 70),
        (249, CompanyTier.MEDIUM, 70),
        (250, CompanyTier.LARGE, 85),
        (999, CompanyTier.LARGE, 85),
        (1000, CompanyTier.ENTERPRISE, 100),
        (250000, CompanyTier.ENTERPRISE, 100),
    ],
)
def test_tier_boundaries(stage, employees, tier, weight):
    result = stage.process(CompanyData(employees=employees))
    assert result.tier == tier
    assert result.weight == weight
    assert result.employees == employees


def test_tier_ranges_partition_positive_counts():
    for employees in range(1, 3001):
        matches = [
            name
            for name, tier in COMPANY_TIERS.items()
            if employees >= tier["employee_range"][0]
            and (tier["employee_range"][1] is None or employees <= tier["employee_range"][1])
        ]
        assert len(matches) == 1, employees


@pytest.mark.parametrize("employees", [0, -5, None])
def test_non_positive_or_missing_count_falls_back_to_startup(stage, employees):
    result = stage.process(CompanyData(employees=employees))
    assert result.tier == CompanyTier.STARTUP
    assert result.weight == 40
    assert result.employees == employees


def test_industry_and_location_pass_through(stage):
    result = stage.process(
        CompanyData(employees=25, industry="SaaS", location="Austin, TX")
    )
    assert result.industry == "SaaS"
    assert result.location == "Austin, TX"


def test_industry_and_location_default_to_unknown(stage):
    result = stage.process(CompanyData(employees=25, industry=""))
    assert result.industry == "unknown"
    assert result.location == "unknown"


@pytest.mark.parametrize(
    "employees,tier",
    [
        (9.5, CompanyTier.STARTUP),
        (12.5, CompanyTier.SMALL),
        (999.5, CompanyTier.STARTUP),
        (1000.0, CompanyTier.ENTERPRISE),
    ],
)
def test_fractional_counts_use_inclusive_ranges(stage, employees, tier):
    result = stage.process(CompanyData(employees=employees))
    assert result.tier == tier
    assert result.employees == employees


def test_integer_counts_stay_integers():
    assert isinstance(CompanyData(employees=25).employees, int)


def test_empty_custom_tier_table_is_respected():
    result = CompanyStage(tiers={}).process(CompanyData(employees=5000))
    assert result.tier == CompanyTier.STARTUP
    assert result.weight == 40
