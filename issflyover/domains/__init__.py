"""
Domain Layer

Domain models and services, split by functional area:

- common: shared models, errors, value objects and the HTTP JSON adapter
- location: public IP lookup and IP geolocation
- satellite: ISS pass-time lookup and the fly-over orchestration
"""
