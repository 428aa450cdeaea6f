from src.closures.application.transformer import (
    describe_lanes,
    describe_route,
    format_timestamp,
    to_analysis_input,
)

MONDAY_9AM_HST = 1748890800000
MONDAY_530PM_HST = 1748921400000


def test_format_timestamp_in_honolulu():
    assert format_timestamp(MONDAY_9AM_HST) == "Monday, 6/2/2025, 9:00 AM"
    assert format_timestamp(MONDAY_530PM_HST) == "Monday, 6/2/2025, 5:30 PM"

def test_format_timestamp_other_timezone():
    assert format_timestamp(MONDAY_9AM_HST, "UTC") == "Monday, 6/2/2025, 7:00 PM"

def test_format_timestamp_missing():
    assert format_timestamp(None) == "N/A"

def test_describe_route(make_closure):
    assert describe_route(make_closure(1)) == "H-1 (Direction: Eastbound)"
    assert describe_route(make_closure(1, route=None, direction=None)) == "N/A (Direction: N/A)"

def test_describe_lanes_singular_and_plural(make_closure):
    assert describe_lanes(make_closure(1, num_lanes_closed=1)) == "1 Lane (Side: Right)"
    assert describe_lanes(make_closure(1, num_lanes_closed=2, closure_side=None)) == "2 Lanes (Side: N/A)"

def test_describe_lanes_falls_back_to_closure_factor(make_closure):
    closure = make_closure(1, num_lanes_closed=None, closure_factor="Shoulder", closure_side="Left")
    assert describe_lanes(closure) == "Shoulder (Side: Left)"
    closure = make_closure(1, num_lanes_closed=None, closure_factor=None, closure_side=None)
    assert describe_lanes(closure) == "N/A (Side: N/A)"

def test_to_analysis_input_wire_shape(make_closure):
    closure = make_closure(42, end_timestamp=MONDAY_530PM_HST, remarks="Night work")
    payload = to_analysis_input(closure).model_dump(by_alias=True)
    assert payload == {
        "id": 42,
        "Route": "H-1 (Direction: Eastbound)",
        "From": "Kunia Rd",
        "To": "Waipahu St",
        "Starts": "Monday, 6/2/2025, 9:00 AM",
        "Ends": "Monday, 6/2/2025, 5:30 PM",
        "LanesAffected": "1 Lane (Side: Right)",
        "Reason": "Paving",
        "Details": "Expect delays",
        "Remarks": "Night work",
    }
