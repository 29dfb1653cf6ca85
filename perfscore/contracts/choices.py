"""Literal-based choice sets shared by the contracts."""

from typing import Literal

FormFactor = Literal["mobile", "desktop"]
ThrottlingMethod = Literal["simulate", "devtools", "provided"]
NumericUnit = Literal["millisecond"]
ScoreDisplayMode = Literal["numeric", "binary", "manual", "informative", "notApplicable", "error"]
ArtifactName = Literal["traces", "devtools_logs", "tested_as_mobile_device"]
