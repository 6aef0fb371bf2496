"""PetDoc booster reminder service package."""
