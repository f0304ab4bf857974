"""Sanity checks on the static UAE catalog."""

from evjourney.domain.catalog import AC_MAX_POWER_KW, CHARGING_STATIONS, EV_MODELS
from evjourney.domain.enums import ConnectorType


def test_ids_are_unique():
    assert len({v.id for v in EV_MODELS}) == len(EV_MODELS)
    assert len({s.id for s in CHARGING_STATIONS}) == len(CHARGING_STATIONS)
    connector_ids = [c.id for s in CHARGING_STATIONS for c in s.connectors]
    assert len(set(connector_ids)) == len(connector_ids)


def test_type2_is_ac_capped():
    for station in CHARGING_STATIONS:
        for c in station.connectors:
            if c.connector_type == ConnectorType.TYPE2.value:
                assert c.max_power_kw <= AC_MAX_POWER_KW


def test_dc_connectors_get_site_rating():
    yas = next(s for s in CHARGING_STATIONS if s.id == "addc-yas-island")
    dc = [c for c in yas.connectors if c.connector_type != ConnectorType.TYPE2.value]
    assert {c.max_power_kw for c in dc} == {180}


def test_supercharger_starts_fully_occupied():
    jbr = next(s for s in CHARGING_STATIONS if s.id == "tesla-supercharger-jbr")
    assert jbr.available_connectors == 0
    assert sum(s.available_connectors > 0 for s in CHARGING_STATIONS) == 4


def test_popular_models():
    unpopular = [v.id for v in EV_MODELS if not v.is_popular_in_uae]
    assert unpopular == ["genesis-gv60"]
