"""SkillMatch: skill listings and trade-match recommendations."""
