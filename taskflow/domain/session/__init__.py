"""
Session bounded context - Domain layer.

This context handles one learner's pass through a flattened task:
- The navigation state machine (screens, flow index, guidance gating)
- Turn-by-turn dialogue and roleplay practice
- Answer checks for every exercise kind
"""
