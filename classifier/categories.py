"""Message categories known to the classifier."""

WORK = "work"
LOCAL_SUGGESTIONS = "local_suggestions"
GENERAL_QUESTIONS = "general_questions"
OTHER = "other"

# Priority order: on equal scores the earlier category wins
CATEGORIES = (WORK, LOCAL_SUGGESTIONS, GENERAL_QUESTIONS, OTHER)

FALLBACK_CATEGORY = OTHER
