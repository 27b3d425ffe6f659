#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import FrozenInstanceError

import pytest
from aws_json_errors.config import RECOGNIZED_HEADER_KEYS, ResolverConfig


def test_defaults() -> None:
    config = ResolverConfig()
    assert config.error_code_field_name == "__type"
    assert config.recognized_header_keys == (
        "x-amzn-ErrorType",
        ":error-code",
        ":exception-type",
    )
    assert config.recognized_header_keys is RECOGNIZED_HEADER_KEYS


def test_config_is_immutable() -> None:
    config = ResolverConfig(error_code_field_name="code")
    with pytest.raises(FrozenInstanceError):
        config.error_code_field_name = "__type"  # type: ignore


def test_empty_field_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        ResolverConfig(error_code_field_name="")
