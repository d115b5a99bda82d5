from dataclasses import dataclass
from uuid import uuid4

import pytest

from travel_survey.shared.domain import WeightMethod


@pytest.fixture
def valid_uuid() -> str:
    """全テスト共通の UUID フィクスチャ"""
    return str(uuid4())


@pytest.fixture
def weight_method() -> WeightMethod:
    return WeightMethod(
        uuid=str(uuid4()),
        shortname="sample-shortname2",
        name="Sample Weight Method2",
        description="Sample weight method description2",
    )


@dataclass
class FakeLambdaContext:
    function_name: str = "validate-trip"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:validate-trip"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: str | None = None


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Lambda コンテキストのフェイク"""
    return FakeLambdaContext()
