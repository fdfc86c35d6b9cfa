from __future__ import annotations

QUIZ_QUESTION_COUNT = 5

QUIZ_SHAPE = """[
  {
    "id": "q1",
    "question": "question text",
    "options": ["option A", "option B", "option C", "option D"],
    "correctAnswer": 0,
    "explanation": "why the correct option is right"
  }
]"""

ROADMAP_SHAPE = """{
  "topic": "topic name",
  "level": "beginner | intermediate | advanced",
  "totalDuration": "overall time estimate, e.g. 8 weeks",
  "description": "one paragraph overview",
  "steps": [
    {
      "id": "step-1",
      "title": "step title",
      "description": "what the learner does in this step",
      "duration": "e.g. 1 week",
      "difficulty": "easy | medium | hard",
      "topics": ["topic"],
      "resources": ["book, course or link"],
      "skills": ["skill gained"]
    }
  ]
}"""


def ask_prompt(question: str) -> str:
    return (
        "You are an expert educational assistant. "
        "Answer the following question clearly with examples if helpful.\n\n"
        f"Question: {question}"
    )


def summarize_prompt(text: str) -> str:
    return f"Summarize the following text with main points and a concise paragraph:\n\nText:\n{text}"


def quiz_prompt(text: str) -> str:
    return (
        f"Based on the content below, create {QUIZ_QUESTION_COUNT} multiple-choice questions. "
        "Each question has exactly 4 options and correctAnswer is the 0-based index of the right option. "
        f"Return only a JSON array in this shape, with no extra text:\n{QUIZ_SHAPE}\n\n"
        f"Content:\n{text}"
    )


def roadmap_prompt(topic: str, level: str) -> str:
    return (
        f'Create a learning roadmap for "{topic}" at {level} level with 5-7 steps. '
        f"Return only a JSON object in this shape, with no extra text:\n{ROADMAP_SHAPE}"
    )
