"""
Server side of the impact analysis contract.
"""
import json
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError as SchemaValidationError

from .prompt import IMPACT_RESPONSE_SCHEMA, SYSTEM_INSTRUCTION, build_prompt
from ..domain.protocols import ImpactModel
from ...common.exceptions import AnalysisServiceError, ConfigurationError
from ...common.logging import setup_logger, log_execution_time
from ...common.schemas.analysis import AnalyzeRequest, ImpactedClosure

logger = setup_logger(__name__)

STAGE = "service"

_impacted_list = TypeAdapter(List[ImpactedClosure])


class ImpactAnalysisService:
    """
    Builds the prompt, calls the model and parses its schema-constrained
    output. Returned ids are passed through as emitted by the model.
    """

    def __init__(self, model: Optional[ImpactModel]):
        self.model = model

    @property
    def is_configured(self) -> bool:
        return self.model is not None

    @log_execution_time(logger)
    def analyze(self, request: AnalyzeRequest) -> List[ImpactedClosure]:
        if self.model is None:
            raise ConfigurationError("Server configuration error: Missing API key.", stage=STAGE)

        contents = build_prompt(request.closures, request.driving_plan)
        text = self.model.generate(contents, SYSTEM_INSTRUCTION, IMPACT_RESPONSE_SCHEMA)

        try:
            return _impacted_list.validate_python(json.loads(text))
        except (ValueError, SchemaValidationError) as e:
            raise AnalysisServiceError(f"AI Service Error: invalid model output ({e})", stage=STAGE) from e
