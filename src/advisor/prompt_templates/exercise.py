PROMPT_TEMPLATE = """Create a diabetes-safe exercise plan:

Fitness Level: {fitness_level}
Time Available: {time_available} minutes
{bg_info}
Preferred Exercise: {preferred_type}

Provide:
1. SAFETY CHECK: Is it safe to exercise now based on BG? (BG 100-250 is generally safe, <100 eat snack first, >250 delay exercise)
2. EXERCISE PLAN: Specific exercises with sets/reps or duration
3. DURATION & INTENSITY: How to structure the workout
4. PRECAUTIONS: Important safety tips

Remember:
- Exercise lowers blood sugar
- Stay hydrated
- Have fast-acting carbs nearby
- Stop if feeling dizzy or unwell"""

BG_LINE_TEMPLATE = "Current Blood Glucose: {current_bg:.1f} mg/dL"
