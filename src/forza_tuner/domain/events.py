import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class TuneCalculated:
    """
    Event emitted by the tune service after a complete tune is produced.
    """
    tune_type: str
    variant: str
    drive_type: str
    pi_class: str
    unit_system: str
    balance: float
    stiffness: float
    final_drive: float
    template_id: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class DifferentialUnavailable:
    """
    Event emitted when no differential baseline exists for a combination.
    """
    drive_type: str
    tune_type: str
