"""
Call Agent: SMS notifications for call events.
"""
