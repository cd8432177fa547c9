"""
Starter exercise catalog.
Loaded into an empty `exercises` table on startup (see seed_exercises).
"""

INITIAL_EXERCISES = [
    # Legs
    {
        "name": "Squat",
        "category": "Legs",
        "description": "Barbell back squat to parallel or below",
        "muscle_groups": ["quadriceps", "glutes", "hamstrings"],
        "equipment": "Barbell"
    },
    {
        "name": "Romanian Deadlift",
        "category": "Legs",
        "description": "Hip hinge with a slight knee bend, bar close to the legs",
        "muscle_groups": ["hamstrings", "glutes", "lower back"],
        "equipment": "Barbell"
    },
    {
        "name": "Walking Lunge",
        "category": "Legs",
        "description": "Alternating forward lunges while moving across the floor",
        "muscle_groups": ["quadriceps", "glutes"],
        "equipment": "Dumbbells"
    },
    {
        "name": "Standing Calf Raise",
        "category": "Legs",
        "description": None,
        "muscle_groups": ["calves"],
        "equipment": "Machine"
    },

    # Chest
    {
        "name": "Bench Press",
        "category": "Chest",
        "description": "Flat barbell press from the chest",
        "muscle_groups": ["chest", "triceps", "front delts"],
        "equipment": "Barbell"
    },
    {
        "name": "Incline Dumbbell Press",
        "category": "Chest",
        "description": "Dumbbell press on a 30-45 degree bench",
        "muscle_groups": ["upper chest", "front delts", "triceps"],
        "equipment": "Dumbbells"
    },
    {
        "name": "Push-up",
        "category": "Chest",
        "description": "Bodyweight press from the floor",
        "muscle_groups": ["chest", "triceps", "core"],
        "equipment": None
    },

    # Back
    {
        "name": "Deadlift",
        "category": "Back",
        "description": "Conventional deadlift from the floor",
        "muscle_groups": ["lower back", "glutes", "hamstrings", "traps"],
        "equipment": "Barbell"
    },
    {
        "name": "Pull-up",
        "category": "Back",
        "description": "Overhand grip pull to the bar",
        "muscle_groups": ["lats", "biceps"],
        "equipment": "Pull-up bar"
    },
    {
        "name": "Bent-over Row",
        "category": "Back",
        "description": "Barbell row with the torso near parallel to the floor",
        "muscle_groups": ["lats", "rhomboids", "rear delts"],
        "equipment": "Barbell"
    },

    # Shoulders
    {
        "name": "Overhead Press",
        "category": "Shoulders",
        "description": "Standing strict press overhead",
        "muscle_groups": ["front delts", "triceps"],
        "equipment": "Barbell"
    },
    {
        "name": "Lateral Raise",
        "category": "Shoulders",
        "description": "Raise dumbbells out to the sides up to shoulder height",
        "muscle_groups": ["side delts"],
        "equipment": "Dumbbells"
    },

    # Arms
    {
        "name": "Barbell Curl",
        "category": "Arms",
        "description": None,
        "muscle_groups": ["biceps"],
        "equipment": "Barbell"
    },
    {
        "name": "Triceps Pushdown",
        "category": "Arms",
        "description": "Cable pushdown with a straight bar or rope",
        "muscle_groups": ["triceps"],
        "equipment": "Cable"
    },

    # Core
    {
        "name": "Plank",
        "category": "Core",
        "description": "Hold a straight body position on the forearms",
        "muscle_groups": ["abs", "core"],
        "equipment": None
    },
    {
        "name": "Hanging Leg Raise",
        "category": "Core",
        "description": "Raise straight legs while hanging from a bar",
        "muscle_groups": ["abs", "hip flexors"],
        "equipment": "Pull-up bar"
    },

    # Cardio
    {
        "name": "Rowing Machine",
        "category": "Cardio",
        "description": "Steady-state or interval rowing",
        "muscle_groups": ["full body"],
        "equipment": "Rower"
    },
]
