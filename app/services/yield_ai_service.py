import csv
import io
import json
import logging
from typing import Optional, Type, TypeVar

from fastapi import HTTPException, status
from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ValidationError

from app.core.genai_client import get_chat_model
from app.models.yield_ai import (
    SYNTHETIC_DATA_COLUMNS,
    AnalyzeYieldInput,
    AnalyzeYieldOutput,
    ExplainRecommendationInput,
    ExplainRecommendationOutput,
    PredictYieldAIInput,
    PredictYieldAIOutput,
    SyntheticCropDataInput,
    SyntheticCropDataOutput,
    SyntheticCropDataResponse,
    TrainingInput,
    TrainingOutput,
)
from app.prompts.analyze_yield_system_prompt import ANALYZE_YIELD_SYSTEM_PROMPT
from app.prompts.explain_recommendation_system_prompt import (
    EXPLAIN_RECOMMENDATION_SYSTEM_PROMPT,
)
from app.prompts.predict_yield_ai_system_prompt import PREDICT_YIELD_AI_SYSTEM_PROMPT
from app.prompts.synthetic_crop_data_system_prompt import (
    SYNTHETIC_CROP_DATA_SYSTEM_PROMPT,
)
from app.prompts.train_random_forest_system_prompt import (
    TRAIN_RANDOM_FOREST_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


def _build_structured_chain(model, schema):
    prompt = ChatPromptTemplate.from_messages(
        [("system", "{system_prompt}"), ("human", "{input_json}")]
    )
    return prompt | model.with_structured_output(schema, method="json_schema")


async def _run_structured_flow(
    *,
    flow: str,
    system_prompt: str,
    schema: Type[OutputT],
    input_data: dict,
    model: Optional[BaseChatModel] = None,
) -> OutputT:
    chain = _build_structured_chain(model=model or get_chat_model(), schema=schema)
    try:
        output = await chain.ainvoke(
            {"system_prompt": system_prompt, "input_json": json.dumps(input_data)}
        )
    except (ValidationError, TypeError):
        logger.exception("Invalid structured output from '%s'", flow)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Received an invalid response from the AI service.",
        )
    except HTTPException:
        raise
    except Exception as e:
        error_message = str(e).lower()
        if "error calling model" in error_message or "api" in error_message:
            logger.warning("GenAI service error in '%s': %s", flow, e)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"GenAI service error: {str(e)}",
            )
        logger.exception("Unexpected failure in '%s'", flow)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred. Please try again.",
        )

    if output is None:
        logger.error("'%s' returned no output", flow)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Received an invalid response from the AI service.",
        )
    if isinstance(output, dict):
        try:
            return schema.model_validate(output)
        except ValidationError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Received an invalid response from the AI service.",
            )
    return output


async def analyze_yield(
    data: AnalyzeYieldInput, *, model: Optional[BaseChatModel] = None
) -> AnalyzeYieldOutput:
    """Qualitative insight and one recommendation for a yield estimate."""
    return await _run_structured_flow(
        flow="analyze_yield",
        system_prompt=ANALYZE_YIELD_SYSTEM_PROMPT,
        schema=AnalyzeYieldOutput,
        input_data=data.model_dump(mode="json"),
        model=model,
    )


async def explain_recommendation(
    data: ExplainRecommendationInput, *, model: Optional[BaseChatModel] = None
) -> ExplainRecommendationOutput:
    """Farmer-facing explanation of a fertilizer or crop-switch recommendation."""
    return await _run_structured_flow(
        flow="explain_recommendation",
        system_prompt=EXPLAIN_RECOMMENDATION_SYSTEM_PROMPT,
        schema=ExplainRecommendationOutput,
        input_data=data.model_dump(mode="json", exclude_none=True),
        model=model,
    )


def summarize_csv(text: str) -> tuple[int, bool]:
    """Return (data row count, header matches the expected columns)."""
    rows = [row for row in csv.reader(io.StringIO(text.strip())) if any(row)]
    if not rows:
        return 0, False
    header = [column.strip().lower() for column in rows[0]]
    return len(rows) - 1, header == SYNTHETIC_DATA_COLUMNS


async def generate_synthetic_crop_data(
    data: SyntheticCropDataInput, *, model: Optional[BaseChatModel] = None
) -> SyntheticCropDataResponse:
    output: SyntheticCropDataOutput = await _run_structured_flow(
        flow="generate_synthetic_crop_data",
        system_prompt=SYNTHETIC_CROP_DATA_SYSTEM_PROMPT,
        schema=SyntheticCropDataOutput,
        input_data=data.model_dump(mode="json"),
        model=model,
    )
    record_count, header_valid = summarize_csv(output.synthetic_crop_data)
    if record_count != data.num_records:
        logger.warning(
            "Synthetic data returned %d records, %d requested",
            record_count,
            data.num_records,
        )
    return SyntheticCropDataResponse(
        synthetic_crop_data=output.synthetic_crop_data,
        record_count=record_count,
        header_valid=header_valid,
    )


async def train_random_forest(
    data: TrainingInput, *, model: Optional[BaseChatModel] = None
) -> TrainingOutput:
    """Simulated training: the model summarizes patterns in the dataset."""
    return await _run_structured_flow(
        flow="train_random_forest",
        system_prompt=TRAIN_RANDOM_FOREST_SYSTEM_PROMPT,
        schema=TrainingOutput,
        input_data=data.model_dump(mode="json"),
        model=model,
    )


async def predict_yield_ai(
    data: PredictYieldAIInput, *, model: Optional[BaseChatModel] = None
) -> PredictYieldAIOutput:
    return await _run_structured_flow(
        flow="predict_yield_ai",
        system_prompt=PREDICT_YIELD_AI_SYSTEM_PROMPT,
        schema=PredictYieldAIOutput,
        input_data=data.model_dump(mode="json", exclude_none=True),
        model=model,
    )
