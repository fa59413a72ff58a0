PROMPT_TEMPLATE = """Provide general information about diabetes medication:

Medication: {medication_name}
Question about: {purpose}

Provide helpful general information, but:
1. DO NOT prescribe or change dosages
2. Emphasize consulting with healthcare provider
3. Mention common considerations
4. Include important safety information

Always include a clear disclaimer that this is educational information only."""

REMINDER = (
    "Set reminders on your phone for medication times. "
    "Never skip doses without consulting your doctor."
)

DISCLAIMER = (
    "⚠️ IMPORTANT: This is educational information only. Always consult your "
    "healthcare provider before starting, stopping, or changing any medication. "
    "This AI advisor cannot replace professional medical advice."
)
