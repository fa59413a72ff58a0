from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AdvisoryRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class BloodSugarRequest(AdvisoryRequest):
    reading: float = Field(description="Blood sugar reading in mg/dL")
    meal_timing: str = Field("", description="Timing: fasting, before_meal, after_meal")
    meal_type: str = Field("", description="Type of meal: breakfast, lunch, dinner, snack")


class MealPlanRequest(AdvisoryRequest):
    diet_type: str = Field(description="Diet preference: vegetarian, non_vegetarian, vegan")
    allergies: str = Field("", description="Any food allergies or restrictions")
    calorie_limit: float = Field(0, ge=0, description="Daily calorie limit (optional)")


class SymptomRequest(AdvisoryRequest):
    symptoms: str = Field(description="Describe symptoms you're experiencing")
    duration: str = Field("", description="How long symptoms have been present")
    current_meds: str = Field("", description="Current medications (optional)")


class ExerciseRequest(AdvisoryRequest):
    fitness_level: str = Field(description="Fitness level: beginner, intermediate, advanced")
    time_available: int = Field(ge=0, description="Minutes available for exercise")
    current_bg: float = Field(0, ge=0, description="Current blood glucose level (optional)")
    preferred_type: str = Field("", description="Exercise preference: cardio, strength, yoga, walking")


class MedicationRequest(AdvisoryRequest):
    medication_name: str = Field(description="Name of medication")
    purpose: str = Field(
        "", description="Purpose of inquiry (dosage, timing, side_effects, interactions)"
    )
