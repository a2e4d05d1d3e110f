"""Tests for the handler registry."""

from __future__ import annotations

import pytest
from botocore.config import Config as BotoConfig

from src.models.resource_ref import ResourceKind
from src.teardown.exceptions import UnknownResourceKindError
from src.teardown.handlers import Ec2InstanceHandler, EcsTaskHandler
from src.teardown.registry import HANDLER_CLASSES, HandlerSet, build_handlers, get_handler_class


class TestRegistry:
    """Tests for handler lookup and construction."""

    def test_every_kind_has_a_handler(self) -> None:
        assert set(HANDLER_CLASSES) == set(ResourceKind)

    def test_handler_kinds_match_registration(self) -> None:
        for kind, handler in build_handlers().items():
            assert handler.kind == kind

    def test_get_handler_class(self) -> None:
        assert get_handler_class(ResourceKind.ECS_TASK) is EcsTaskHandler
        assert get_handler_class(ResourceKind.EC2_INSTANCE) is Ec2InstanceHandler

    def test_get_handler_class_unknown(self) -> None:
        with pytest.raises(UnknownResourceKindError):
            get_handler_class("lambda:function")  # type: ignore[arg-type]

    def test_build_handlers_passes_settings(self) -> None:
        config = BotoConfig(read_timeout=5)

        handlers = build_handlers(profile_name="prod", region="us-west-2", client_config=config)

        for handler in handlers.values():
            assert handler.profile_name == "prod"
            assert handler.region == "us-west-2"
            assert handler.client_config is config

    def test_only_instances_lack_teardown(self) -> None:
        unsupported = {kind for kind, handler in build_handlers().items() if not handler.supports_teardown}
        assert unsupported == {ResourceKind.EC2_INSTANCE}

    def test_handler_set_missing_kind(self) -> None:
        handler_set = HandlerSet(handlers={})

        with pytest.raises(UnknownResourceKindError):
            handler_set.handler_for(ResourceKind.SQS_QUEUE)
