# SPDX-License-Identifier: MIT
"""Application services for the fdist CLI.

Services implement the release pipeline, coordinating between the domain
layer (core/) and infrastructure (platform/).
"""

from fdist.services.build_errors import BuildError
from fdist.services.pipeline import BuildReport, BuildService
from fdist.services.request import BuildRequest, make_request, resolve_project_root

__all__ = [
    "BuildError",
    "BuildReport",
    "BuildRequest",
    "BuildService",
    "make_request",
    "resolve_project_root",
]
