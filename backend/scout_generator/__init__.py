"""
Embedded scouted-player generator.

Generates ground-truth football players and a scout's noisy report on each,
with accuracy driven by the scout's skills. The FastAPI layer and the CLI both
go through `GenerationService`.
"""

from .errors import PersistenceWarning, ScoutGeneratorError, ValidationError  # noqa: F401
from .models import (  # noqa: F401
    Attributes,
    Confidence,
    GeneratedPlayer,
    GenerationResult,
    Player,
    Position,
    RoleBucket,
    ScoutingReport,
    ScoutSkillProfile,
)
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource  # noqa: F401
from .service import GenerationService, PersistenceSink, PersistOutcome  # noqa: F401
