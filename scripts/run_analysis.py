import os
import sys
import hydra
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.exceptions import LaneClosureError
from src.common.logging import setup_logger
from src.analysis.application.builder import LaneClosureApplicationBuilder
from src.analysis.application.client import analyze_driving_plan
from src.analysis.application.scoring import impacted_only
from src.closures.application.transformer import format_timestamp

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    cfg = ConfigManager().validate(cfg)
    logger = setup_logger("lane_closures", cfg.logging.level)

    island = cfg.closures.island
    tz_name = cfg.analysis.timezone

    builder = LaneClosureApplicationBuilder(cfg)
    pipeline = builder.build_source().build_pipeline()

    try:
        closures = pipeline.fetch(island)
    except LaneClosureError as e:
        logger.error(f"Could not load closures for {island}: {e}")
        sys.exit(1)

    for closure in closures:
        logger.info(
            f"{closure.id}: {closure.route} ({closure.direction}) {closure.from_location} -> "
            f"{closure.to_location} | {format_timestamp(closure.begin_timestamp, tz_name)} - "
            f"{format_timestamp(closure.end_timestamp, tz_name)}"
        )

    if not cfg.analysis.plan:
        return

    builder.build_client()
    try:
        scored = analyze_driving_plan(builder.client, closures, cfg.analysis.plan, tz_name=tz_name)
    except LaneClosureError as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(1)

    impacted = impacted_only(scored)
    if not impacted:
        logger.info("No closures affect this driving plan.")
    for item in impacted:
        score = item.impact.impact_score
        logger.info(f"[{score.level.value} {score.value}] {item.record.route}: {item.impact.analysis_text}")

if __name__ == "__main__":
    main()
