# Routes package init
"""
PetDemo: Routes Package
=======================

Route Inventory:
    - pages.py:   GET /, /page1, /page2, /page3, /page4   (templates)
    - cats.py:    GET /getName, POST /setName,
                  GET /searchName, POST /updateLast         (JSON)
    - dogs.py:    POST /setDogName, POST /searchDogName     (JSON)
    - health.py:  GET /health
    - body.py:    JSON/form body reader shared by the POST handlers

Routes stay thin: read the request, call a service, return its result.
Unmatched paths fall through to the not-found page handler in main.py.
"""
