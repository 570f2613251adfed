"""Application layer: DTOs, ports, pure services and use cases.

No runtime imports from assignment_hub.infrastructure or assignment_hub.api.
"""
