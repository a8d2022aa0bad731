"""Configuration for the dry-run engine."""

from typing import Literal

from pydantic import BaseModel


class DryRunConfig(BaseModel):
    """Configuration for the dry-run engine."""

    # Reported status; lets CI rehearse failure handling without a toolchain
    status: Literal["success", "failure", "error"] = "success"
