from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from advisor.classification import classify_blood_sugar, classify_urgency
from advisor.prompt_templates import blood_sugar, exercise, meal_plan, medication, symptoms
from advisor.schemas import (
    AdvisoryRequest,
    AdvisoryResponse,
    BloodSugarRequest,
    BloodSugarResponse,
    ExerciseRequest,
    ExerciseResponse,
    MealPlanRequest,
    MealPlanResponse,
    MedicationRequest,
    MedicationResponse,
    SymptomRequest,
    SymptomResponse,
)
from advisor.segmentation import parse_meal_sections, split_into_sections


PromptRenderer = Callable[[AdvisoryRequest], str]
ResponseBuilder = Callable[[AdvisoryRequest, str], AdvisoryResponse]


@dataclass(frozen=True)
class AdvisoryCategory:
    id: str
    name: str
    path: str
    description: str
    failure_context: str
    request_model: Type[AdvisoryRequest]
    response_model: Type[AdvisoryResponse]
    render_prompt: PromptRenderer
    build_response: ResponseBuilder


def render_blood_sugar_prompt(request: BloodSugarRequest) -> str:
    return blood_sugar.PROMPT_TEMPLATE.format(
        reading=request.reading,
        meal_timing=request.meal_timing,
        meal_type=request.meal_type,
    )


def build_blood_sugar_response(request: BloodSugarRequest, text: str) -> BloodSugarResponse:
    # Status comes from the reading itself; the prose only fills the narrative.
    parts = split_into_sections(text, 3)
    return BloodSugarResponse(
        status=classify_blood_sugar(request.reading),
        interpretation=parts[0],
        recommendation=parts[1],
    )


def render_meal_plan_prompt(request: MealPlanRequest) -> str:
    calorie_info = ""
    if request.calorie_limit > 0:
        calorie_info = meal_plan.CALORIE_LINE_TEMPLATE.format(calorie_limit=request.calorie_limit)
    return meal_plan.PROMPT_TEMPLATE.format(
        diet_type=request.diet_type,
        allergies=request.allergies,
        calorie_info=calorie_info,
    )


def build_meal_plan_response(request: MealPlanRequest, text: str) -> MealPlanResponse:
    sections = parse_meal_sections(text)
    return MealPlanResponse(
        breakfast=sections["breakfast"],
        lunch=sections["lunch"],
        dinner=sections["dinner"],
        snacks=sections["snacks"],
    )


def render_symptom_prompt(request: SymptomRequest) -> str:
    return symptoms.PROMPT_TEMPLATE.format(
        symptoms=request.symptoms,
        duration=request.duration,
        current_meds=request.current_meds,
    )


def build_symptom_response(request: SymptomRequest, text: str) -> SymptomResponse:
    parts = split_into_sections(text, 3)
    return SymptomResponse(
        urgency=classify_urgency(text),
        assessment=parts[0],
        next_steps=parts[1],
    )


def render_exercise_prompt(request: ExerciseRequest) -> str:
    bg_info = ""
    if request.current_bg > 0:
        bg_info = exercise.BG_LINE_TEMPLATE.format(current_bg=request.current_bg)
    return exercise.PROMPT_TEMPLATE.format(
        fitness_level=request.fitness_level,
        time_available=request.time_available,
        bg_info=bg_info,
        preferred_type=request.preferred_type,
    )


def build_exercise_response(request: ExerciseRequest, text: str) -> ExerciseResponse:
    parts = split_into_sections(text, 4)
    return ExerciseResponse(
        safety_check=parts[0],
        recommendation=parts[1],
        duration=parts[2],
        precautions=parts[3],
    )


def render_medication_prompt(request: MedicationRequest) -> str:
    return medication.PROMPT_TEMPLATE.format(
        medication_name=request.medication_name,
        purpose=request.purpose,
    )


def build_medication_response(request: MedicationRequest, text: str) -> MedicationResponse:
    return MedicationResponse(
        information=text.strip(),
        reminder=medication.REMINDER,
        disclaimer=medication.DISCLAIMER,
    )


CATEGORIES: List[AdvisoryCategory] = [
    AdvisoryCategory(
        id="blood_sugar",
        name="bloodSugarInterpreter",
        path="/bloodSugar",
        description="Interpret blood sugar readings",
        failure_context="failed to interpret blood sugar",
        request_model=BloodSugarRequest,
        response_model=BloodSugarResponse,
        render_prompt=render_blood_sugar_prompt,
        build_response=build_blood_sugar_response,
    ),
    AdvisoryCategory(
        id="meal_plan",
        name="mealPlanner",
        path="/mealPlan",
        description="Get diabetes-friendly meal plans",
        failure_context="failed to generate meal plan",
        request_model=MealPlanRequest,
        response_model=MealPlanResponse,
        render_prompt=render_meal_plan_prompt,
        build_response=build_meal_plan_response,
    ),
    AdvisoryCategory(
        id="symptoms",
        name="symptomChecker",
        path="/symptoms",
        description="Check symptoms and get guidance",
        failure_context="failed to check symptoms",
        request_model=SymptomRequest,
        response_model=SymptomResponse,
        render_prompt=render_symptom_prompt,
        build_response=build_symptom_response,
    ),
    AdvisoryCategory(
        id="exercise",
        name="exerciseAdvisor",
        path="/exercise",
        description="Get safe exercise recommendations",
        failure_context="failed to generate exercise plan",
        request_model=ExerciseRequest,
        response_model=ExerciseResponse,
        render_prompt=render_exercise_prompt,
        build_response=build_exercise_response,
    ),
    AdvisoryCategory(
        id="medication",
        name="medicationInfo",
        path="/medication",
        description="Get medication information",
        failure_context="failed to get medication info",
        request_model=MedicationRequest,
        response_model=MedicationResponse,
        render_prompt=render_medication_prompt,
        build_response=build_medication_response,
    ),
]

_CATEGORIES_BY_ID: Dict[str, AdvisoryCategory] = {category.id: category for category in CATEGORIES}


def list_categories() -> List[AdvisoryCategory]:
    return CATEGORIES


def get_category(category_id: str) -> AdvisoryCategory:
    if category_id not in _CATEGORIES_BY_ID:
        raise KeyError(f"Unknown advisory category: {category_id}")
    return _CATEGORIES_BY_ID[category_id]
