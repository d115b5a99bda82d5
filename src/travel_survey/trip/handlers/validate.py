from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from travel_survey.shared.utils import api_response, get_logger
from travel_survey.trip.applications.validate_trip import ValidateTripService
from travel_survey.trip.domain import BaseTripFactory
from travel_survey.trip.handlers.request_models import ValidateTripRequest
from travel_survey.trip.handlers.response_models import (
    to_error_response,
    to_response,
)

logger = get_logger("trip")

factory = BaseTripFactory()
service = ValidateTripService(factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """トリップ検証 Lambda Handler

    パラメータの構造エラーは 422 で、リクエスト形式の誤りは 400 で返す。
    """

    logger.info("Received validate trip request")

    try:
        request = ValidateTripRequest.model_validate_json(event.body or "")
    except ValidationError as e:
        logger.warning("Invalid request body", extra={"errors": e.error_count()})
        return api_response(400, {"message": "Invalid request body"})

    try:
        result = service.validate(request.trip)
    except Exception:
        logger.exception("Failed to validate trip")
        return api_response(500, {"message": "Internal server error"})

    if result.trip is None:
        logger.info(
            "Trip parameters are invalid", extra={"error_count": len(result.errors)}
        )
        return api_response(422, to_error_response(result.errors))

    logger.info(
        "Trip validated",
        extra={"uuid": result.trip.uuid, "is_valid": result.trip.is_valid()},
    )
    return api_response(200, to_response(result.trip))
