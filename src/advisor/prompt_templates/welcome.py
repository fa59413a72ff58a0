PROMPT_TEMPLATE = (
    "Generate a warm welcome, encouraging welcome message for diabetes patients "
    "using this AI health advisor. Keep it under 50 words."
)
