from typing import Dict, Optional

from omegaconf import DictConfig

from .client import ImpactAnalyzerClient
from ...closures.application.pipeline import ClosureAggregationPipeline
from ...closures.domain.protocols import ClosureSource
from ...closures.infrastructure.arcgis_source import ArcGISClosureSource
from ...common.logging import setup_logger

logger = setup_logger(__name__)

class LaneClosureApplicationBuilder:
    """
    Builder pattern for wiring the closure pipeline and the analysis client
    from configuration.
    """

    def __init__(self, config: DictConfig):
        self.config = config
        self.closures_cfg = config.closures
        self.analysis_cfg = config.analysis

        # Components
        self.source: Optional[ClosureSource] = None
        self.pipeline: Optional[ClosureAggregationPipeline] = None
        self.client: Optional[ImpactAnalyzerClient] = None

    def build_source(self) -> 'LaneClosureApplicationBuilder':
        logger.info(f"Using closure feed: {self.closures_cfg.base_url}")
        self.source = ArcGISClosureSource(
            base_url=self.closures_cfg.base_url,
            lookahead_hours=self.closures_cfg.get('lookahead_hours', 24),
            timeout_seconds=self.closures_cfg.get('timeout_seconds', 30.0),
        )
        return self

    def build_client(self) -> 'LaneClosureApplicationBuilder':
        logger.info(f"Using analysis endpoint: {self.analysis_cfg.endpoint}")
        self.client = ImpactAnalyzerClient(
            endpoint=self.analysis_cfg.endpoint,
            api_key=self.analysis_cfg.get('api_key'),
            timeout_seconds=self.analysis_cfg.get('timeout_seconds', 120.0),
        )
        return self

    def build_pipeline(self) -> ClosureAggregationPipeline:
        if not self.source:
            self.build_source()
        self.pipeline = ClosureAggregationPipeline(self.source)
        return self.pipeline

    def get_components(self) -> Dict:
        """Returns built components for external use"""
        return {
            'source': self.source,
            'pipeline': self.pipeline,
            'client': self.client,
        }
