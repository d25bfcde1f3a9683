"""logic — Game systems package.

Top-level modules
-----------------
movement        InputState, movement_system — axis-separated wall sliding
contact         contact_system — player touches NPC, NPC dies, stain spawns
entity_factory  spawn_player / spawn_npc / spawn_stain, room sampling
tick            tick_systems — per-tick pipeline
session         Session, SessionState — one round and its restart
input_manager   InputManager — pygame events → intents (shell only)
"""
