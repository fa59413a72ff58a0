from __future__ import annotations

from pydantic import BaseModel, Field


class AdvisoryResponse(BaseModel):
    pass


class BloodSugarResponse(AdvisoryResponse):
    status: str = Field(description="Status: normal, high, low, critical")
    interpretation: str = Field(description="Detailed interpretation")
    recommendation: str = Field(description="Immediate recommendations")


class MealPlanResponse(AdvisoryResponse):
    breakfast: str = Field(description="Breakfast suggestions")
    lunch: str = Field(description="Lunch suggestions")
    dinner: str = Field(description="Dinner suggestions")
    snacks: str = Field(description="Healthy snack options")


class SymptomResponse(AdvisoryResponse):
    urgency: str = Field(description="Urgency level: emergency, urgent, routine")
    assessment: str = Field(description="Symptom assessment")
    next_steps: str = Field(description="Recommended next steps")


class ExerciseResponse(AdvisoryResponse):
    safety_check: str = Field(description="Safety considerations based on BG")
    recommendation: str = Field(description="Exercise recommendations")
    duration: str = Field(description="Recommended duration and intensity")
    precautions: str = Field(description="Important precautions")


class MedicationResponse(AdvisoryResponse):
    information: str = Field(description="Medication information")
    reminder: str = Field(description="Important reminders")
    disclaimer: str = Field(description="Medical disclaimer")
