# Alt-text description and translation prompts

DESCRIBE_SYSTEM_PROMPT = (
    "You write concise, factual alt text (80-125 chars). "
    "Avoid 'image of' or 'picture of'."
)

DESCRIBE_USER_PROMPT = (
    "Describe this image for alt text (80–125 characters). "
    "Be precise, no embellishment."
)

# Returned when the model answers with an empty message.
FALLBACK_ALT_TEXT = "Descriptive alt text."

TRANSLATE_SYSTEM_PROMPT = (
    "Translate the given alt text into the requested locales exactly. "
    "Faithful meaning, no embellishment. "
    "Return strict JSON with keys matching the requested locales."
)
