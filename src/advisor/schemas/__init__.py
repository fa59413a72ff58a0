from .requests import (
    AdvisoryRequest,
    BloodSugarRequest,
    ExerciseRequest,
    MealPlanRequest,
    MedicationRequest,
    SymptomRequest,
)
from .responses import (
    AdvisoryResponse,
    BloodSugarResponse,
    ExerciseResponse,
    MealPlanResponse,
    MedicationResponse,
    SymptomResponse,
)

__all__ = [
    "AdvisoryRequest",
    "AdvisoryResponse",
    "BloodSugarRequest",
    "BloodSugarResponse",
    "ExerciseRequest",
    "ExerciseResponse",
    "MealPlanRequest",
    "MealPlanResponse",
    "MedicationRequest",
    "MedicationResponse",
    "SymptomRequest",
    "SymptomResponse",
]
