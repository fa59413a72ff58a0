PROMPT_TEMPLATE = """Create a diabetes-friendly meal plan:

Diet Type: {diet_type}
Allergies/Restrictions: {allergies}
{calorie_info}

For each meal, provide:
- Specific food items
- Approximate portion sizes
- Why it's good for blood sugar control

Focus on:
- Low glycemic index foods
- Balanced macros (protein, healthy fats, complex carbs)
- High fiber content
- Foods that prevent blood sugar spikes

Format:
BREAKFAST: [meal details]
LUNCH: [meal details]
DINNER: [meal details]
SNACKS: [snack options]"""

CALORIE_LINE_TEMPLATE = "Target daily calories: {calorie_limit:.0f}"
