"""
Core package: states, hook responses, the transition table and the machine.
"""
