"""Instructor delivery guide text used to ground the strategy assistant."""

REFERENCE_GUIDE = """
Instructor Delivery Guide: Active Learning Activities (Polaris 2.0 Update)
Shared Principles: Set the Stage, Create Safety, Be Active, Timebox Clearly, Debrief Effectively.
Warm-Up Poll (Polaris 2.0): 7-10 mins. Use Mentimeter. Flow: Launch (1m), Think & Vote (2-3m), Show Results/Leaderboard (1-2m), Recognition (ongoing), Anchor (2m).
Curiosity Trigger (Polaris 2.0): 3-5 mins. Interactive classroom warm-up. Flow: Prepare Slide (Pre-Session), Launch (1m), Ask Verbally (1-2m), Write & Record (1-2m), Lesson Hook (1m).
Think-Pair-Share (TPS) (Polaris 2.0): 10 mins total. Phases: Think (2m), Pair (2-3m), Share (3-5m), Debrief (1m).
TPS Focus: Reasoning-driven, collaborative discussions. Instructor walk-around is critical. Use reasoning-based open-ended questions.
Self-Reflection (Polaris 2.0): 5 mins total. 1 min Launch, 3 min Reflect, 1 min Reassure. Use Google Forms, Formbricks, SurveyHeart.
"""
