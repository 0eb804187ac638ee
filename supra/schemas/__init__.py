"""Bibliography schemas."""

from supra.schemas.csl import CSLSource, DateVariable, Name, build_csl_lib

__all__ = ["CSLSource", "DateVariable", "Name", "build_csl_lib"]
