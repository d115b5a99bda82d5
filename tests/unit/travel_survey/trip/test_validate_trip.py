from unittest.mock import MagicMock

from travel_survey.trip.applications.validate_trip import ValidateTripService
from travel_survey.trip.domain import BaseTrip, BaseTripFactory


class TestValidateTripService:
    """ValidateTripService のテスト"""

    def test_valid_trip_is_created_and_validated(self, valid_uuid):
        # Arrange
        service = ValidateTripService(factory=BaseTripFactory())
        payload = {
            "_uuid": valid_uuid,
            "baseOrigin": {"activityCategory": "home"},
            "baseDestination": {"activityCategory": "work"},
            "baseSegments": [{"mode": "walk"}],
        }

        # Act
        result = service.validate(payload)

        # Assert
        assert result.errors == []
        assert isinstance(result.trip, BaseTrip)
        assert result.trip.is_valid() is True

    def test_param_errors_are_returned_in_order(self):
        # Arrange
        service = ValidateTripService(factory=BaseTripFactory())
        payload = {
            "_uuid": "invalid-uuid",
            "baseDestination": 12,
            "_weights": "invalid-weights",
        }

        # Act
        result = service.validate(payload)

        # Assert
        assert result.trip is None
        assert [str(e) for e in result.errors] == [
            "Uuidable validateParams: invalid uuid",
            "BaseTrip validateParams: baseDestination should be an object",
            "BaseTrip validateWeights: _weights should be an array",
        ]

    def test_trip_is_not_created_when_params_are_invalid(self):
        # Arrange
        factory = MagicMock(spec=BaseTripFactory)
        factory.to_params.return_value = {"baseOrigin": "invalid-origin"}
        service = ValidateTripService(factory=factory)

        # Act
        service.validate({"baseOrigin": "invalid-origin"})

        # Assert
        factory.create.assert_not_called()
