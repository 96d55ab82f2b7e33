"""
Fauna API: Routes Package
==========================

Route inventory:
    - home.py:          GET  /
    - health.py:        GET  /health
    - especies.py:      GET|POST /api/especies, PUT|DELETE /api/especies/{id}
                        (GET requires a bearer token)
    - usuarios.py:      GET|POST /api/usuarios, PUT|DELETE /api/usuarios/{id}
    - avistamientos.py: GET|POST /api/avistamientos, PUT|DELETE /api/avistamientos/{id}
    - imagenes.py:      GET|POST /api/avistamientos/{id}/imagenes,
                        DELETE /api/avistamientos/{id}/imagenes/{imagen_id}
    - auth.py:          POST /api/login
    - detect.py:        POST /api/detect

Routes stay thin: they read the request, call a service and shape the
response. Failures are raised as FaunaError subclasses and rendered by the
handlers registered in main.py.
"""
