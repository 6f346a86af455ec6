"""Symptom catalog and quality-of-life domain registry.

Every tracked symptom and every "positive" wellbeing signal maps to exactly
one MENQOL-style quality-of-life domain. The mapping is a closed lookup
table: adding a symptom means adding a row here, nothing else.

Source: Menopause-Specific Quality of Life questionnaire (Hilditch et al.,
Maturitas 1996) - four domains scored 0-8 per item.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class QoLDomain(Enum):
    """Quality-of-life domains, in declaration order.

    Declaration order is significant: it breaks ties when picking the
    dominant domain for a recommendation.
    """
    VASOMOTOR = "vasomotor"
    PSYCHOSOCIAL = "psychosocial"
    PHYSICAL = "physical"
    SEXUAL = "sexual"


class SymptomCategory(Enum):
    """Capture-form category. Decides the intensity scale of a symptom."""
    PHYSICAL = "physical"               # 0-5 intensity
    PSYCHOLOGICAL = "psychological"     # 0-3 intensity
    INTIMATE = "intimate"               # 0-3 intensity


class SymptomId(Enum):
    """Closed enumeration of tracked symptoms (catalog scan order)."""
    HOT_FLASHES = "hot_flashes"
    NIGHT_SWEATS = "night_sweats"
    HEADACHES = "headaches"
    JOINT_PAIN = "joint_pain"
    FATIGUE = "fatigue"
    ANXIETY = "anxiety"
    IRRITABILITY = "irritability"
    BRAIN_FOG = "brain_fog"
    LOW_MOOD = "low_mood"
    LOW_LIBIDO = "low_libido"
    VAGINAL_DRYNESS = "vaginal_dryness"


class SignalId(Enum):
    """Wellbeing signals where a high value means low burden."""
    MOOD = "mood"
    SLEEP_QUALITY = "sleep_quality"
    ENERGY_LEVEL = "energy_level"


CATEGORY_MAX_INTENSITY: Dict[SymptomCategory, int] = {
    SymptomCategory.PHYSICAL: 5,
    SymptomCategory.PSYCHOLOGICAL: 3,
    SymptomCategory.INTIMATE: 3,
}


@dataclass(frozen=True)
class SymptomSpec:
    """One catalog row for a symptom."""
    symptom: SymptomId
    category: SymptomCategory
    domain: QoLDomain

    @property
    def max_intensity(self) -> int:
        return CATEGORY_MAX_INTENSITY[self.category]


@dataclass(frozen=True)
class SignalSpec:
    """One catalog row for a positive signal (inverted burden)."""
    signal: SignalId
    min_value: int
    max_value: int
    domain: QoLDomain


class SymptomCatalog:
    """Fixed registry of symptoms and signals.

    Lookups of ids that are not registered raise KeyError: that is a
    programming error, not bad user data.
    """

    SYMPTOMS: Tuple[SymptomSpec, ...] = (
        SymptomSpec(SymptomId.HOT_FLASHES, SymptomCategory.PHYSICAL, QoLDomain.VASOMOTOR),
        SymptomSpec(SymptomId.NIGHT_SWEATS, SymptomCategory.PHYSICAL, QoLDomain.VASOMOTOR),
        SymptomSpec(SymptomId.HEADACHES, SymptomCategory.PHYSICAL, QoLDomain.PHYSICAL),
        SymptomSpec(SymptomId.JOINT_PAIN, SymptomCategory.PHYSICAL, QoLDomain.PHYSICAL),
        SymptomSpec(SymptomId.FATIGUE, SymptomCategory.PHYSICAL, QoLDomain.PHYSICAL),
        SymptomSpec(SymptomId.ANXIETY, SymptomCategory.PSYCHOLOGICAL, QoLDomain.PSYCHOSOCIAL),
        SymptomSpec(SymptomId.IRRITABILITY, SymptomCategory.PSYCHOLOGICAL, QoLDomain.PSYCHOSOCIAL),
        SymptomSpec(SymptomId.BRAIN_FOG, SymptomCategory.PSYCHOLOGICAL, QoLDomain.PSYCHOSOCIAL),
        SymptomSpec(SymptomId.LOW_MOOD, SymptomCategory.PSYCHOLOGICAL, QoLDomain.PSYCHOSOCIAL),
        SymptomSpec(SymptomId.LOW_LIBIDO, SymptomCategory.INTIMATE, QoLDomain.SEXUAL),
        SymptomSpec(SymptomId.VAGINAL_DRYNESS, SymptomCategory.INTIMATE, QoLDomain.SEXUAL),
    )

    SIGNALS: Tuple[SignalSpec, ...] = (
        SignalSpec(SignalId.MOOD, 1, 5, QoLDomain.PSYCHOSOCIAL),
        SignalSpec(SignalId.SLEEP_QUALITY, 1, 10, QoLDomain.PHYSICAL),
        SignalSpec(SignalId.ENERGY_LEVEL, 1, 5, QoLDomain.PHYSICAL),
    )

    _BY_SYMPTOM: Dict[str, SymptomSpec] = {spec.symptom.value: spec for spec in SYMPTOMS}
    _BY_SIGNAL: Dict[str, SignalSpec] = {spec.signal.value: spec for spec in SIGNALS}

    @classmethod
    def symptom(cls, symptom_id: str) -> SymptomSpec:
        """Catalog row for a symptom id. Raises KeyError if unregistered."""
        return cls._BY_SYMPTOM[symptom_id]

    @classmethod
    def signal(cls, signal_id: str) -> SignalSpec:
        """Catalog row for a signal id. Raises KeyError if unregistered."""
        return cls._BY_SIGNAL[signal_id]

    @classmethod
    def is_registered(cls, symptom_id: str) -> bool:
        return symptom_id in cls._BY_SYMPTOM

    @classmethod
    def symptom_ids(cls) -> Tuple[str, ...]:
        """Symptom ids in catalog scan order."""
        return tuple(spec.symptom.value for spec in cls.SYMPTOMS)

    @classmethod
    def domain_of(cls, item_id: str) -> QoLDomain:
        """Domain of a symptom or signal id. Raises KeyError if unregistered."""
        if item_id in cls._BY_SYMPTOM:
            return cls._BY_SYMPTOM[item_id].domain
        return cls._BY_SIGNAL[item_id].domain

    @classmethod
    def items_for(cls, domain: QoLDomain) -> Tuple[str, ...]:
        """All symptom and signal ids scored under a domain.

        Raises:
            KeyError: If domain is not a registered QoLDomain
        """
        if not isinstance(domain, QoLDomain):
            raise KeyError(f"Unregistered quality-of-life domain: {domain!r}")
        symptoms = [s.symptom.value for s in cls.SYMPTOMS if s.domain is domain]
        signals = [s.signal.value for s in cls.SIGNALS if s.domain is domain]
        return tuple(symptoms + signals)
