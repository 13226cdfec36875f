"""Ancestry analysis: walking pedigrees, shared ancestors, specialization."""

from heritage.lineage.inbreeding import InbreedingDetector, detect_inbreeding
from heritage.lineage.specialization import LineageSpecializationAnalyzer
from heritage.lineage.walker import AncestorWalker

__all__ = [
    "AncestorWalker",
    "InbreedingDetector",
    "LineageSpecializationAnalyzer",
    "detect_inbreeding",
]
