"""Built-in photosynthesis quiz used when no quiz file is supplied."""

from __future__ import annotations

from quiz_show.core.models import Question

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        id=1,
        prompt="With the help of what do green plants make their own food?",
        choices=("The Moon", "The Sun", "The stars"),
        correct_index=1,
        explanation="Light energy from the Sun powers the process of photosynthesis.",
    ),
    Question(
        id=2,
        prompt="What is the process by which green plants make food called?",
        choices=("Photosynthesis", "Respiration", "Fermentation"),
        correct_index=0,
        explanation=(
            "Photosynthesis is how plants build glucose using light, CO₂ and water."
        ),
    ),
    Question(
        id=3,
        prompt=(
            "Besides water and sunlight, what do plants need to carry out photosynthesis?"
        ),
        choices=("Carbon dioxide", "Oxygen", "Wind"),
        correct_index=0,
        explanation=(
            "Carbon dioxide (CO₂) from the air is absorbed through the stomata to form glucose."
        ),
    ),
    Question(
        id=4,
        prompt="From which part of the plant is water taken up for photosynthesis?",
        choices=("Leaves", "Stem", "Roots"),
        correct_index=2,
        explanation=(
            "Roots absorb water from the soil, and the xylem carries it up to the leaves."
        ),
    ),
    Question(
        id=5,
        prompt="Which gas do plants release during photosynthesis?",
        choices=("Oxygen", "Carbon dioxide", "Nitrogen"),
        correct_index=0,
        explanation="Oxygen (O₂) is released through the stomata as a by-product of photosynthesis.",
    ),
)
