"""Canned model completions shared by the tests."""

import json

QUIZ_ITEMS = [
    {
        "id": f"q{n}",
        "question": f"Question {n}?",
        "options": ["A", "B", "C", "D"],
        "correctAnswer": n % 4,
        "explanation": f"Because of reason {n}.",
    }
    for n in range(1, 6)
]

QUIZ_FENCED = f"```json\n{json.dumps(QUIZ_ITEMS, indent=2)}\n```"

ROADMAP = {
    "topic": "Machine Learning",
    "level": "beginner",
    "totalDuration": "8 weeks",
    "description": "From linear models to neural networks.",
    "steps": [
        {
            "id": "step-1",
            "title": "Math foundations",
            "description": "Linear algebra and probability.",
            "duration": "2 weeks",
            "difficulty": "easy",
            "topics": ["vectors", "matrices", "vectors"],
            "resources": ["Khan Academy"],
            "skills": ["matrix multiplication"],
        },
        {
            "id": "step-2",
            "title": "Supervised learning",
            "description": "Regression and classification.",
            "duration": "3 weeks",
            "difficulty": "medium",
            "topics": ["regression", "classification"],
            "resources": ["scikit-learn docs"],
            "skills": ["model evaluation"],
        },
    ],
}

ROADMAP_FENCED = f"```json\n{json.dumps(ROADMAP)}\n```"

LONG_TEXT = (
    "Photosynthesis is the process used by plants, algae and certain bacteria to turn light energy "
    "into chemical energy stored in glucose. It takes place mainly in the chloroplasts of leaf cells."
)
