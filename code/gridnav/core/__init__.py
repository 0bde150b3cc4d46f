"""
Core navigation components: world representation, agents and navigation systems.
"""
