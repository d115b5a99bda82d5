from uuid import uuid1, uuid4

import pytest

from travel_survey.shared.utils import is_valid_uuid


class TestIsValidUuid:
    @pytest.mark.parametrize(
        "value",
        [
            str(uuid4()),
            str(uuid1()),
            str(uuid4()).upper(),
            "00000000-0000-0000-0000-000000000000",
        ],
    )
    def test_valid(self, value):
        assert is_valid_uuid(value)

    @pytest.mark.parametrize(
        "value",
        [
            "invalid-uuid",
            "",
            str(uuid4()).replace("-", ""),
            "0b9e2a64-3f8e-0d6c-9a51-6f3c1d2e7b80",
            str(uuid4()) + "\n",
            None,
            1234,
        ],
    )
    def test_invalid(self, value):
        assert not is_valid_uuid(value)
