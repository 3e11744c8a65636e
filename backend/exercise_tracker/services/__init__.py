"""Services Layer — data access for users and exercises.

Invariants:
    - Stores receive their AsyncSession (and collaborators) through the constructor
    - Stores raise ExerciseTrackerError subclasses, never HTTP exceptions
"""
