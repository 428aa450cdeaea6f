import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.logging import setup_logger
from src.analysis.presentation.api import app, configure

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    cfg = ConfigManager().validate(cfg)
    logger = setup_logger("lane_closures", cfg.logging.level)

    if not cfg.service.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; analysis requests will fail with a configuration error.")

    configure(cfg)

    server_cfg = cfg.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
