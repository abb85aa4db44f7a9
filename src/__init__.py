"""
Media Explorer - Couche de données d'un explorateur de films.

Ce package orchestre le catalogue distant TMDB et le stockage local des
favoris et avis personnels, et publie l'état vers la couche de rendu.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (orchestration, contrôleurs d'écran)
- adapters/ : Client du catalogue distant
- infrastructure/ : Persistance SQLite (SQLModel)
"""
