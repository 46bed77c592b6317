"""Tests for the dashboard query pipeline."""

from collections.abc import Callable

import pytest

from ev_charging_insights.application.services import DashboardQueryService, StationNormalizer
from ev_charging_insights.domain.models import FilterCriteria, NormalizedDataset, StationRecord

StationFactory = Callable[..., StationRecord]


@pytest.fixture
def dataset(make_station: StationFactory) -> NormalizedDataset:
    """Create a normalized dataset with 20 operational VIC stations and a few others."""
    records = [
        make_station(region="Victoria", town="Geelong", is_operational=True, operator="Chargefox")
        for _ in range(20)
    ]
    records += [
        make_station(region="New South Wells", town="Sydney", is_operational=True, operator="Evie"),
        make_station(region="nsw", town="Newcastle", status_title="Planned", operator="Evie"),
        make_station(region="Springvale", town="", is_operational=False),
    ]
    StationNormalizer().normalize(records)
    return NormalizedDataset(records=tuple(records))


def test_run_query_combines_stats_and_prediction(dataset: NormalizedDataset) -> None:
    """Given the full dataset, when querying without filters, then stats carry the predicted gap."""
    result = DashboardQueryService().run_query(dataset, FilterCriteria())

    assert result.stats.active_count == 21
    assert result.stats.planned_count == 1
    assert result.stats.gap_count == 3
    assert result.stats.density_by_region == {"VIC": 20, "NSW": 2, "Unknown": 1}
    assert [(s.region, s.unit_count) for s in result.suggestions] == [
        ("VIC", 3),
        ("NSW", 1),
        ("Unknown", 1),
    ]


def test_run_query_applies_filters(dataset: NormalizedDataset) -> None:
    """Given a region filter, when querying, then only that region is counted."""
    result = DashboardQueryService().run_query(dataset, FilterCriteria(region="NSW"))

    assert result.stats.active_count == 1
    assert result.stats.planned_count == 1
    assert result.stats.gap_count == 0
    assert result.stats.density_by_region == {"NSW": 2}
    assert result.suggestions == ()


@pytest.mark.parametrize(
    "criteria",
    [
        FilterCriteria(),
        FilterCriteria(region="VIC"),
        FilterCriteria(city="Sydney"),
        FilterCriteria(town="Springvale", status="unknown"),
        FilterCriteria(status="planned"),
        FilterCriteria(region="TAS"),
    ],
)
def test_density_is_conserved_for_any_criteria(
    dataset: NormalizedDataset, criteria: FilterCriteria
) -> None:
    """Given any criteria, when querying, then densities add up to the number of filtered records."""
    service = DashboardQueryService()

    result = service.run_query(dataset, criteria)
    filtered = [r for r in dataset.records if service._filter.matches(r, criteria)]

    assert sum(result.stats.density_by_region.values()) == len(filtered)


def test_repeated_queries_do_not_accumulate_state(dataset: NormalizedDataset) -> None:
    """Given alternating criteria, when querying repeatedly, then results depend only on the criteria."""
    service = DashboardQueryService()

    first = service.run_query(dataset, FilterCriteria(region="VIC"))
    service.run_query(dataset, FilterCriteria(region="NSW"))
    again = service.run_query(dataset, FilterCriteria(region="VIC"))

    assert first == again


def test_run_query_does_not_modify_dataset(dataset: NormalizedDataset) -> None:
    """Given a dataset, when querying, then its records are unchanged."""
    before = [r.model_dump() for r in dataset.records]

    DashboardQueryService().run_query(dataset, FilterCriteria(status="operational"))

    assert [r.model_dump() for r in dataset.records] == before


def test_filter_options_lists_regions_and_localities(dataset: NormalizedDataset) -> None:
    """Given a dataset, when collecting filter options, then sorted distinct values are returned."""
    options = DashboardQueryService().filter_options(dataset)

    assert options.regions == ("NSW", "Unknown", "VIC")
    assert options.localities == ("Geelong", "Newcastle", "Springvale", "Sydney")


def test_filter_options_skip_records_without_address(make_station: StationFactory) -> None:
    """Given records without address or locality, when collecting options, then they add nothing."""
    records = [make_station(is_operational=True), make_station(region="VIC", town="")]
    StationNormalizer().normalize(records)

    options = DashboardQueryService().filter_options(NormalizedDataset(records=tuple(records)))

    assert options.regions == ("VIC",)
    assert options.localities == ()
