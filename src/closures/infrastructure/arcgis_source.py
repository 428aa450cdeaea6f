"""
Lane closure source backed by an ArcGIS FeatureServer query endpoint.
"""
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

import requests
from pydantic import ValidationError as SchemaValidationError

from ..domain.entities import ClosureRecord
from ...common.exceptions import NetworkError, UpstreamDataError
from ...common.logging import setup_logger, log_execution_time
from ...common.schemas.closure import (
    CLOSURE_OUT_FIELDS,
    ClosureFeatureCollection,
    ClosureFeatureProperties,
    FeatureServiceError,
)

logger = setup_logger(__name__)

STAGE = "fetch"

# Active, driver-relevant, non-sidewalk closures with a real time range
BASE_WHERE = (
    "(beginDate <> enDate) and (Active = '1') and (DIRPInfo = 'Yes') "
    "and (CloseFact <> 'Sidewalk')"
)


def format_arcgis_timestamp(moment: datetime) -> str:
    """UTC 'YYYY-MM-DD HH:MM:SS' as expected by timestamp literals."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_where_clause(island: str, start: datetime, end: datetime) -> str:
    date_where = (
        f"(beginDate <= timestamp '{format_arcgis_timestamp(end)}') "
        f"and (enDate >= timestamp '{format_arcgis_timestamp(start)}')"
    )
    island_where = f"(Island = {_quote(island)})"
    return f"{BASE_WHERE} and {date_where} and {island_where}"


def to_record(properties: ClosureFeatureProperties) -> ClosureRecord:
    return ClosureRecord(
        id=properties.object_id,
        route=properties.route,
        direction=properties.direction,
        from_location=properties.from_location,
        to_location=properties.to_location,
        begin_timestamp=properties.begin_date,
        end_timestamp=properties.end_date,
        num_lanes_closed=properties.num_lanes,
        closure_side=properties.closure_side,
        closure_factor=properties.close_fact,
        closure_reason=properties.closure_reason,
        details=properties.details,
        remarks=properties.remarks,
        hours_pattern=properties.hours,
        island=properties.island,
    )


class ArcGISClosureSource:
    """
    Queries the FeatureServer for closures active within a lookahead window.
    Returns raw records; normalization and ordering happen in the pipeline.
    """

    def __init__(
        self,
        base_url: str,
        lookahead_hours: int = 24,
        timeout_seconds: float = 30.0,
        session: Optional[requests.Session] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.base_url = base_url
        self.lookahead = timedelta(hours=lookahead_hours)
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def build_query_params(self, island: str) -> Dict[str, str]:
        start = self._clock()
        end = start + self.lookahead
        return {
            "where": build_where_clause(island, start, end),
            "outFields": ",".join(CLOSURE_OUT_FIELDS),
            "returnGeometry": "false",
            "f": "geoJson",
        }

    @log_execution_time(logger)
    def fetch_raw(self, island: str) -> List[ClosureRecord]:
        params = self.build_query_params(island)

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch closure data: {e}", stage=STAGE) from e

        if not response.ok:
            raise UpstreamDataError(
                f"Failed to fetch closure data: HTTP error! status: {response.status_code} {response.reason}",
                stage=STAGE,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamDataError(f"Failed to fetch closure data: invalid JSON ({e})", stage=STAGE) from e

        if isinstance(data, dict) and 'error' in data:
            try:
                envelope = FeatureServiceError.model_validate(data)
                detail = f"{envelope.error.message} (Code: {envelope.error.code})"
            except SchemaValidationError:
                detail = str(data['error'])
            raise UpstreamDataError(f"Failed to fetch closure data: API Error: {detail}", stage=STAGE)

        try:
            collection = ClosureFeatureCollection.model_validate(data)
        except SchemaValidationError as e:
            raise UpstreamDataError(f"Failed to fetch closure data: unexpected payload ({e})", stage=STAGE) from e

        records = []
        for feature in collection.features:
            if feature.properties.object_id is None:
                logger.warning("Skipping closure feature without OBJECTID")
                continue
            records.append(to_record(feature.properties))

        logger.info(f"Fetched {len(records)} closures for island {island}")
        return records
