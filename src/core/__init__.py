"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (CatalogItem, PersonalReview)
- ports/ : Interfaces abstraites (ICatalogClient, IFavoritesStore) et valeur Failure
- value_objects/ : Objets valeur immutables (CastMember, ItemPage, Genre)
"""
