"""Alloy design engine services."""
from .elements import (
    ELEMENTS, ELEMENT_DATA, ElementData, QUENCH_MEDIA, QUENCH_CONFIGS,
    QuenchConfig, resolve_quench_medium,
)
from .composition import DEFAULT_COMPOSITION, normalize_composition, clamp_weight
from .mechanical_properties import MechanicalPropertyPredictor, MechanicalProperties
from .physical_properties import density, cost, sustainability_score, cost_breakdown
from .narrative import generate_narrative, NarrativeContext
from .snapshot_service import ProcessParameters, PropertySnapshot, evaluate
from .comparison_service import (
    ComparisonService, ReferenceComparison, DesignAssessment,
    REFERENCE_COMPOSITION, REFERENCE_PROCESS, reference_snapshot,
)
from .report_generator import TextReportGenerator, generate_text_report, report_filename
from . import phase_transformation

__all__ = [
    # Reference tables
    'ELEMENTS',
    'ELEMENT_DATA',
    'ElementData',
    'QUENCH_MEDIA',
    'QUENCH_CONFIGS',
    'QuenchConfig',
    'resolve_quench_medium',
    # Composition
    'DEFAULT_COMPOSITION',
    'normalize_composition',
    'clamp_weight',
    # Property models
    'MechanicalPropertyPredictor',
    'MechanicalProperties',
    'density',
    'cost',
    'sustainability_score',
    'cost_breakdown',
    'generate_narrative',
    'NarrativeContext',
    # Aggregation and comparison
    'ProcessParameters',
    'PropertySnapshot',
    'evaluate',
    'ComparisonService',
    'ReferenceComparison',
    'DesignAssessment',
    'REFERENCE_COMPOSITION',
    'REFERENCE_PROCESS',
    'reference_snapshot',
    # Reporting
    'TextReportGenerator',
    'generate_text_report',
    'report_filename',
    'phase_transformation',
]
