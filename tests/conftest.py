import pytest
from src.closures.domain.entities import ClosureRecord

# Monday 2025-06-02 09:00 and 17:30 in Honolulu
MONDAY_9AM_HST = 1748890800000
MONDAY_530PM_HST = 1748921400000
HOUR_MS = 3600 * 1000

@pytest.fixture
def make_closure():
    def _make(id, **overrides):
        fields = dict(
            route="H-1",
            direction="Eastbound",
            from_location="Kunia Rd",
            to_location="Waipahu St",
            begin_timestamp=MONDAY_9AM_HST,
            end_timestamp=MONDAY_9AM_HST + 4 * HOUR_MS,
            num_lanes_closed=1,
            closure_side="Right",
            closure_factor="Lane",
            closure_reason="Paving",
            details="Expect delays",
            remarks=None,
            hours_pattern="24Hrs",
            island="Oahu",
        )
        fields.update(overrides)
        return ClosureRecord(id=id, **fields)
    return _make

@pytest.fixture
def raw_feature():
    def _feature(object_id, **overrides):
        properties = {
            "OBJECTID": object_id,
            "Route": "H-1",
            "direct": "Eastbound",
            "intsfroml": "Kunia Rd, Hawaii, USA",
            "intstol": "Waipahu St, Hawaii, USA",
            "beginDate": MONDAY_9AM_HST,
            "enDate": MONDAY_9AM_HST + 4 * HOUR_MS,
            "NumLanes": 1,
            "ClosureSide": "Right",
            "CloseFact": "Lane",
            "ClosReason": "Paving",
            "DirPRemarks": "Expect delays.\nUse caution",
            "Remarks": None,
            "ClosHours": "24Hrs",
            "Island": "Oahu",
        }
        properties.update(overrides)
        return {"type": "Feature", "properties": properties}
    return _feature
