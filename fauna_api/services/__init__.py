# Services package init
"""
Fauna API: Services Layer
==========================

Logic between the routes (HTTP) and the database or the detection service.

Service inventory:
    - CrudService:      parametrized list/create/update/delete over one table
    - auth_service:     bcrypt credentials, JWT tokens, login flow
    - FileService:      upload storage for the detection proxy
    - DetectionService: forwards an image to the species-detection endpoint
"""
