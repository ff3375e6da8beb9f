#!/usr/bin/env python3
"""ah - the AWS cli helper."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import fire

from ah.cli.main import main
from ah.core.config import ConfigLoader, ProviderConfig
from ah.lifecycle import LifecycleManager
from ah.providers.aws import InstanceControl, InstanceDirectory
from ah.utils import log_and_print_error


class Ah:
    """The AWS cli helper: list, start and stop instances by Name tag."""

    def __init__(
        self,
        directory_factory: Callable[[ProviderConfig], Any] | None = None,
        control_factory: Callable[[ProviderConfig], Any] | None = None,
        boto3_client_factory: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize the CLI with optional dependency injection."""
        self._config_loader = ConfigLoader()
        self._boto3_client_factory = boto3_client_factory
        self._directory_factory = directory_factory or self._create_directory
        self._control_factory = control_factory or self._create_control

    def _create_directory(self, config: ProviderConfig) -> InstanceDirectory:
        return InstanceDirectory(config, boto3_client_factory=self._boto3_client_factory)

    def _create_control(self, config: ProviderConfig) -> InstanceControl:
        return InstanceControl(config, boto3_client_factory=self._boto3_client_factory)

    def _lifecycle_manager(
        self, region: str | None, profile: str | None
    ) -> LifecycleManager:
        config = self._config_loader.build_provider_config(
            region=region, profile=profile
        )
        return LifecycleManager(
            config=config,
            directory_factory=self._directory_factory,
            control_factory=self._control_factory,
            log_and_print_error=log_and_print_error,
        )

    def ls(self, region: str | None = None, profile: str | None = None) -> None:
        """Lists all instances."""
        self._lifecycle_manager(region, profile).ls()

    @fire.decorators.SetParseFn(str, "name")
    def start(
        self, name: str, region: str | None = None, profile: str | None = None
    ) -> None:
        """Start the instance whose Name tag is NAME."""
        self._lifecycle_manager(region, profile).start(name)

    @fire.decorators.SetParseFn(str, "name")
    def stop(
        self, name: str, region: str | None = None, profile: str | None = None
    ) -> None:
        """Stop the instance whose Name tag is NAME."""
        self._lifecycle_manager(region, profile).stop(name)


if __name__ == "__main__":
    main()
