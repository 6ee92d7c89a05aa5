"""
Static catalogue: per-discipline descriptions and named slider templates.
"""
from typing import Dict, List, Optional

from ..domain.enums import DriveType, TuneType
from ..domain.models import TuneTemplate, TuneTypeDescription
from .variants import DEFAULT_VARIANTS, VARIANTS_BY_TUNE_TYPE

TUNE_TYPE_DESCRIPTIONS: Dict[TuneType, dict] = {
    TuneType.GRIP: {
        "title": "Circuit/Grip",
        "description": "Maximum cornering grip for track racing",
        "tips": [
            "Target hot tire pressure: 32-34 PSI (2.2-2.3 Bar)",
            "Negative camber -1.2° to -1.5° for optimal contact patch",
            "Diff 40% accel / 10-30% decel for smooth power delivery",
            "AWD center balance: 65-75% rear bias for rotation",
        ],
    },
    TuneType.STREET: {
        "title": "Street",
        "description": "Balanced everyday driving",
        "tips": [
            "Balanced pressures for mixed conditions",
            "Moderate camber for tire longevity",
            "Comfortable ride height with good grip",
            "Stock-like differential for predictability",
        ],
    },
    TuneType.RACE: {
        "title": "Race",
        "description": "Stiff, low and aggressive for competitive circuit events",
        "tips": [
            "Critically damped suspension for fast weight transfer",
            "Higher diff accel lock for corner exit traction",
            "Close gear ratios keep the engine in its power band",
            "Run the most aero the straights allow",
        ],
    },
    TuneType.DRIFT: {
        "title": "Drift",
        "description": "Maximum angle and slide control",
        "tips": [
            "Low front pressure maximizes steering friction",
            "High rear pressure promotes controlled slip",
            "Extreme front camber (-5.0°) for wide angle stability",
            "High diff lock for consistent power slides",
        ],
    },
    TuneType.DRAG: {
        "title": "Drag",
        "description": "Maximum straight-line acceleration",
        "tips": [
            "High front pressure for stability",
            "Low rear pressure for squat and traction",
            "Soft rear springs allow weight transfer for launch",
            "High accel diff lock for maximum power delivery",
        ],
    },
    TuneType.RALLY: {
        "title": "Rally",
        "description": "Mixed surface performance",
        "tips": [
            "Medium-low pressure for grip on loose surfaces",
            "Higher ride height for jumps and rough sections",
            "AWD center: extra front bias for traction",
            "Moderate damping for predictable landings",
        ],
    },
    TuneType.OFFROAD: {
        "title": "Off-Road/Cross Country",
        "description": "Flotation physics for rough terrain",
        "tips": [
            "Low tire pressure for flotation",
            "Soft springs (1.0-1.5 Hz frequency) for terrain absorption",
            "High rebound damping to \"stick\" jump landings",
            "Soft ARBs for maximum wheel independence",
        ],
    },
}

_ALL_DRIVES = [DriveType.RWD, DriveType.AWD, DriveType.FWD]

TUNE_TEMPLATES: List[TuneTemplate] = [
    # Starter
    TuneTemplate(
        id="track-day-special",
        name="Track Day Special",
        description="Stiff, low, maximum grip for circuit racing. Precision handling for hot laps.",
        category="starter",
        tune_types=[TuneType.GRIP],
        drive_types=_ALL_DRIVES,
        balance=0,
        stiffness=80,
        tips=[
            "Lower ride height reduces center of gravity",
            "Stiff springs prevent body roll in corners",
            "High aero adds grip at speed but increases drag",
        ],
    ),
    TuneTemplate(
        id="highway-cruiser",
        name="Highway Cruiser",
        description="Comfortable street tune with excellent stability. Great for cruise events.",
        category="starter",
        tune_types=[TuneType.STREET],
        drive_types=_ALL_DRIVES,
        balance=-20,
        stiffness=30,
        tips=[
            "Softer suspension absorbs bumps better",
            "Slight understeer bias increases stability",
            "Lower diff aggression prevents wheel spin",
        ],
    ),
    TuneTemplate(
        id="drift-machine",
        name="Drift Machine",
        description="Max angle, controlled slides. Tuned for style points and linking corners.",
        category="starter",
        tune_types=[TuneType.DRIFT],
        drive_types=[DriveType.RWD, DriveType.AWD],
        balance=60,
        stiffness=45,
        tips=[
            "Oversteer bias initiates slides easily",
            "Locked diff maintains consistent angle",
            "No aero allows the rear to break loose",
        ],
    ),
    TuneTemplate(
        id="rally-ready",
        name="Rally Ready",
        description="Soft suspension, high travel. Built for gravel, dirt, and mixed surfaces.",
        category="starter",
        tune_types=[TuneType.RALLY, TuneType.OFFROAD],
        drive_types=[DriveType.AWD, DriveType.RWD],
        balance=10,
        stiffness=25,
        tips=[
            "Soft springs absorb terrain impacts",
            "Higher ride height clears obstacles",
            "Moderate diff allows corner rotation",
        ],
    ),
    TuneTemplate(
        id="drag-strip-king",
        name="Drag Strip King",
        description="Maximum straight-line speed. Optimized for 1/4 and 1/2 mile sprints.",
        category="starter",
        tune_types=[TuneType.DRAG],
        drive_types=[DriveType.RWD, DriveType.AWD],
        balance=-30,
        stiffness=70,
        tips=[
            "Understeer bias keeps you straight",
            "Locked diff maximizes launch traction",
            "No aero reduces drag for top speed",
        ],
    ),
    TuneTemplate(
        id="all-rounder",
        name="All-Rounder",
        description="Balanced for mixed use. Great for Horizon Open and varied events.",
        category="starter",
        tune_types=[TuneType.GRIP, TuneType.STREET],
        drive_types=_ALL_DRIVES,
        balance=0,
        stiffness=50,
        tips=[
            "Neutral balance adapts to any situation",
            "Medium settings work everywhere",
            "Good starting point for fine-tuning",
        ],
    ),
    # Meta
    TuneTemplate(
        id="s2-road-meta",
        name="S2 Road Racing Meta",
        description="Competitive S2 class setup. Used by top rivals players.",
        category="meta",
        tune_types=[TuneType.GRIP],
        drive_types=[DriveType.AWD, DriveType.RWD],
        balance=5,
        stiffness=85,
        tips=[
            "Slight oversteer for quick rotation",
            "Very stiff for S2 power levels",
            "Max aero for high-speed corners",
        ],
    ),
    TuneTemplate(
        id="a-class-rivals",
        name="A-Class Rivals Setup",
        description="Optimized A-class handling. The sweet spot of power and grip.",
        category="meta",
        tune_types=[TuneType.GRIP],
        drive_types=_ALL_DRIVES,
        balance=-5,
        stiffness=65,
        tips=[
            "Slight understeer for consistency",
            "Moderate stiffness suits A-class power",
            "FWD benefits from this template",
        ],
    ),
    TuneTemplate(
        id="x-class-drag",
        name="X-Class Drag Build",
        description="Maximum power launch setup. For 1500+ HP monsters.",
        category="meta",
        tune_types=[TuneType.DRAG],
        drive_types=[DriveType.AWD],
        balance=-40,
        stiffness=90,
        tips=[
            "Strong understeer prevents wheelies",
            "Very stiff to handle massive power",
            "AWD essential for launching X-class",
        ],
    ),
    # Specialty
    TuneTemplate(
        id="tandem-drift",
        name="Tandem Drift Pro",
        description="Responsive setup for following or leading in tandem drift.",
        category="specialty",
        tune_types=[TuneType.DRIFT],
        drive_types=[DriveType.RWD],
        balance=50,
        stiffness=50,
        tips=[
            "Quick transitions for following",
            "Slightly softer for adjustability",
            "Near-locked diff for consistency",
        ],
    ),
    TuneTemplate(
        id="cross-country",
        name="Cross Country Beast",
        description="High-speed off-road racing. Jumps, bumps, and everything between.",
        category="specialty",
        tune_types=[TuneType.OFFROAD],
        drive_types=[DriveType.AWD],
        balance=0,
        stiffness=35,
        tips=[
            "Neutral for landing stability",
            "Soft enough to absorb big jumps",
            "High diff keeps power down on bumps",
        ],
    ),
    TuneTemplate(
        id="wet-weather",
        name="Wet Weather Warrior",
        description="Optimized for rain and low-grip conditions.",
        category="specialty",
        tune_types=[TuneType.GRIP, TuneType.STREET],
        drive_types=[DriveType.AWD, DriveType.FWD],
        balance=-25,
        stiffness=40,
        tips=[
            "Understeer bias prevents snap oversteer",
            "Softer setup loads tires gently",
            "Lower diff prevents wheelspin",
        ],
    ),
]

_TEMPLATE_INDEX: Dict[str, TuneTemplate] = {t.id: t for t in TUNE_TEMPLATES}


def describe_tune_type(tune_type: TuneType) -> TuneTypeDescription:
    return TuneTypeDescription(
        tune_type=tune_type,
        variants=VARIANTS_BY_TUNE_TYPE[tune_type],
        default_variant=DEFAULT_VARIANTS[tune_type],
        **TUNE_TYPE_DESCRIPTIONS[tune_type],
    )


def get_templates_for_tune_type(tune_type: TuneType) -> List[TuneTemplate]:
    return [t for t in TUNE_TEMPLATES if tune_type in t.tune_types]


def get_templates_for_drive_type(drive_type: DriveType) -> List[TuneTemplate]:
    return [t for t in TUNE_TEMPLATES if drive_type in t.drive_types]


def get_compatible_templates(tune_type: TuneType, drive_type: DriveType) -> List[TuneTemplate]:
    return [t for t in TUNE_TEMPLATES if tune_type in t.tune_types and drive_type in t.drive_types]


def get_template(template_id: str) -> Optional[TuneTemplate]:
    return _TEMPLATE_INDEX.get(template_id)
