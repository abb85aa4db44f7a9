"""
Valeur observable pour publier l'etat vers la couche de rendu.

LiveValue contient la derniere valeur publiee et notifie ses observateurs a
chaque mise a jour. set_value() s'appelle depuis la boucle d'evenements ;
post_value() permet a un worker de marshaller une valeur vers la boucle.

Les resultats one-shot (une requete = une reponse) ne passent pas par ici :
ce sont de simples coroutines ou futures, sans abonnement a detacher.
"""

import asyncio
import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Observer = Callable[[T], None]


class LiveValue(Generic[T]):
    """
    Cellule observable, derniere ecriture gagnante.

    Example:
        error = LiveValue[Optional[str]](None)
        unsubscribe = error.observe(print)
        error.set_value("Failed to load popular: timeout")
        unsubscribe()
    """

    def __init__(self, initial: Optional[T] = None) -> None:
        self._value = initial
        self._observers: list[Observer] = []
        self._lock = threading.Lock()
        self._version = 0

    @property
    def value(self) -> Optional[T]:
        """Derniere valeur publiee."""
        return self._value

    @property
    def version(self) -> int:
        """Nombre de publications depuis la creation."""
        return self._version

    def set_value(self, value: T) -> None:
        """Publie une valeur et notifie les observateurs dans le thread appelant."""
        with self._lock:
            self._value = value
            self._version += 1
            observers = list(self._observers)
        for observer in observers:
            observer(value)

    def post_value(self, value: T, loop: asyncio.AbstractEventLoop) -> None:
        """Publie une valeur depuis un autre thread via la boucle d'evenements."""
        loop.call_soon_threadsafe(self.set_value, value)

    def observe(self, observer: Observer, emit_current: bool = False) -> Callable[[], None]:
        """
        Enregistre un observateur.

        Args:
            observer: Appele avec chaque nouvelle valeur
            emit_current: Si True, appelle immediatement l'observateur avec la valeur courante

        Returns:
            Fonction qui detache l'observateur
        """
        with self._lock:
            self._observers.append(observer)
            current = self._value
        if emit_current:
            observer(current)
        return lambda: self.remove_observer(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Detache un observateur (sans effet s'il n'est pas enregistre)."""
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    @property
    def observer_count(self) -> int:
        return len(self._observers)
