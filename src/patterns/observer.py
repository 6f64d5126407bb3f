from abc import ABC, abstractmethod
from typing import Iterable, List, Union


class ObserverInvalido(TypeError):
    """Elemento anexado não implementa Observer"""


class ObserverNaoEncontrado(LookupError):
    """Observer (ou índice) não está anexado ao subject"""


class Observer(ABC):
    @abstractmethod
    def atualizar(self, evento: str) -> str:
        pass


class Subject(ABC):
    @abstractmethod
    def anexar(self, observable):
        pass

    @abstractmethod
    def desanexar(self, alvo):
        pass

    @abstractmethod
    def notificar(self) -> List[str]:
        pass


class Login(Subject):
    evento = "login"

    def __init__(self):
        self._observers: List[Observer] = []

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def anexar(self, observable):
        """Anexa um observer ou um iterável deles; o lote inteiro é validado antes"""
        if not isinstance(observable, (Observer, str, bytes)) and isinstance(observable, Iterable):
            lote = list(observable)
            invalidos = [o for o in lote if not isinstance(o, Observer)]
            if invalidos:
                raise ObserverInvalido(
                    f"{type(invalidos[0]).__name__} não implementa Observer"
                )
            self._observers.extend(lote)
            return self
        if not isinstance(observable, Observer):
            raise ObserverInvalido(f"{type(observable).__name__} não implementa Observer")
        self._observers.append(observable)
        return self

    def desanexar(self, alvo: Union[Observer, int]) -> Observer:
        if isinstance(alvo, Observer):
            if alvo not in self._observers:
                raise ObserverNaoEncontrado(f"{type(alvo).__name__} não está anexado")
            self._observers.remove(alvo)
            return alvo
        if isinstance(alvo, bool) or not isinstance(alvo, int):
            raise ObserverInvalido(f"Esperado Observer ou índice, recebido {type(alvo).__name__}")
        if not 0 <= alvo < len(self._observers):
            raise ObserverNaoEncontrado(f"Nenhum observer no índice {alvo}")
        return self._observers.pop(alvo)

    def notificar(self) -> List[str]:
        return [observer.atualizar(self.evento) for observer in self._observers]

    def disparar(self) -> List[str]:
        return self.notificar()


class LoginHandler(Observer):
    def atualizar(self, evento: str) -> str:
        mensagem = f"[{evento}] Login realizado!!"
        print(mensagem)
        return mensagem


class EmailHandler(Observer):
    def atualizar(self, evento: str) -> str:
        mensagem = f"[{evento}] Email enviado!!"
        print(mensagem)
        return mensagem


class RelatorioHandler(Observer):
    def atualizar(self, evento: str) -> str:
        mensagem = f"[{evento}] Relatório gerado!!"
        print(mensagem)
        return mensagem
