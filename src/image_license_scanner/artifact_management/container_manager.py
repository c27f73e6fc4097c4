# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
from types import TracebackType
from typing import Optional

from image_license_scanner.adaptors.datetime import get_datetime_now
from image_license_scanner.adaptors.os import run_command_with_timeout, sleep
from image_license_scanner.artifact_management.execution_context import (
    ContainerExecutionContext,
)

# Get application-specific logger
logger = logging.getLogger("image_license_scanner")

SUPPORTED_RUNTIMES = ["docker", "nerdctl"]


class ScanEnvironmentError(Exception):
    """Exception raised when no usable scan context can be established."""

    pass


def detect_container_runtime(preferred: Optional[str] = None) -> str:
    candidates = [preferred] if preferred else SUPPORTED_RUNTIMES
    for runtime in candidates:
        logger.debug(f"Testing container runtime {runtime}")
        if run_command_with_timeout([runtime, "version"], timeout=30).success:
            logger.info(f"Using {runtime} as container runtime")
            return runtime
        logger.warning(f"{runtime} not found or not accessible")
    raise ScanEnvironmentError(
        "No accessible container runtime found. Install and configure one of: "
        + ", ".join(candidates)
    )


class ContainerManager:
    """Owns the lifecycle of the temporary container a scan runs against.

    Used as a context manager: entering pulls the image when needed and
    starts the container, leaving always removes it, also when entering
    fails half way. An image that inspects fine but cannot run any command
    is treated as a distroless image and `context` stays None.
    """

    def __init__(
        self,
        image: str,
        runtime: str,
        startup_delay: float = 2,
        command_timeout: float = 60,
        pull_timeout: float = 1800,
    ) -> None:
        self.image = image
        self.runtime = runtime
        self.startup_delay = startup_delay
        self.command_timeout = command_timeout
        self.pull_timeout = pull_timeout
        timestamp = get_datetime_now().strftime("%Y%m%d_%H%M%S")
        self.container_name = f"package-scan-temp-{timestamp}"
        self.context: ContainerExecutionContext | None = None
        self.is_distroless = False

    def _runtime(self, *args: str, timeout: float | None = None) -> bool:
        result = run_command_with_timeout(
            [self.runtime, *args], timeout or self.command_timeout
        )
        if not result.success:
            logger.debug(f"{self.runtime} {' '.join(args)} failed: {result.stderr}")
        return result.success

    def ensure_image(self) -> None:
        if self._runtime("image", "inspect", self.image):
            logger.info(f"Image {self.image} found locally")
            return
        logger.info(f"Image not found locally. Pulling {self.image}...")
        if not self._runtime("pull", self.image, timeout=self.pull_timeout):
            raise ScanEnvironmentError(f"Failed to pull image {self.image}")

    def _is_responsive(self) -> bool:
        sleep(self.startup_delay)
        return self._runtime("exec", self.container_name, "echo", "test")

    def _remove_container(self) -> None:
        self._runtime("rm", "-f", self.container_name)

    def _image_is_inspectable(self) -> bool:
        return self._runtime("image", "inspect", self.image)

    def start(self) -> ContainerExecutionContext | None:
        self.ensure_image()
        logger.info("Creating temporary container...")
        started = self._runtime(
            "run", "-d", "--name", self.container_name, self.image, "sleep", "3600"
        )
        if started and self._is_responsive():
            self.context = ContainerExecutionContext(self.runtime, self.container_name)
            return self.context

        logger.info(
            "Standard sleep command failed, retrying with the entrypoint overridden"
        )
        self._remove_container()
        started = self._runtime(
            "run",
            "-d",
            "--name",
            self.container_name,
            "--entrypoint=",
            self.image,
            "tail",
            "-f",
            "/dev/null",
        )
        if started and self._is_responsive():
            self.context = ContainerExecutionContext(self.runtime, self.container_name)
            return self.context

        self._remove_container()
        # the image exists but cannot run a command: no shell, so nothing to enumerate
        if not self._image_is_inspectable():
            raise ScanEnvironmentError(
                f"Failed to create container from image {self.image}"
            )
        logger.warning(
            "This appears to be a distroless image with no package managers."
        )
        self.is_distroless = True
        return None

    def stop(self) -> None:
        logger.info("Cleaning up temporary container...")
        self._remove_container()
        self.context = None

    def __enter__(self) -> "ContainerManager":
        try:
            self.start()
        except BaseException:
            self._remove_container()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.stop()
