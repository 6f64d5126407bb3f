"""
Padrão Template Method para o ciclo de vida de um jogo
"""
from abc import ABC, abstractmethod
from typing import List


class Jogo(ABC):
    """Define a ordem fixa das etapas; subclasses só implementam as etapas"""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "jogar" in cls.__dict__:
            raise TypeError(f"{cls.__name__} não pode sobrescrever jogar()")

    @abstractmethod
    def inicializar(self) -> str:
        pass

    @abstractmethod
    def iniciar_partida(self) -> str:
        pass

    @abstractmethod
    def encerrar_partida(self) -> str:
        pass

    def jogar(self) -> List[str]:
        return [
            self.inicializar(),
            self.iniciar_partida(),
            self.encerrar_partida(),
        ]


class Mario(Jogo):
    def inicializar(self) -> str:
        mensagem = "[Mario] Jogo inicializado! Comece a jogar."
        print(mensagem)
        return mensagem

    def iniciar_partida(self) -> str:
        mensagem = "[Mario] Jogo iniciado. Divirta-se!"
        print(mensagem)
        return mensagem

    def encerrar_partida(self) -> str:
        mensagem = "[Mario] Jogo finalizado!"
        print(mensagem)
        return mensagem


class Tankfight(Jogo):
    def inicializar(self) -> str:
        mensagem = "[Tankfight] Jogo inicializado! Comece a jogar."
        print(mensagem)
        return mensagem

    def iniciar_partida(self) -> str:
        mensagem = "[Tankfight] Jogo iniciado. Divirta-se!"
        print(mensagem)
        return mensagem

    def encerrar_partida(self) -> str:
        mensagem = "[Tankfight] Jogo finalizado!"
        print(mensagem)
        return mensagem


JOGOS_DISPONIVEIS = {
    "mario": Mario,
    "tankfight": Tankfight,
}


def criar_jogo(nome: str) -> Jogo:
    jogo_class = JOGOS_DISPONIVEIS.get(nome.lower())
    if jogo_class is None:
        raise ValueError(f"Jogo '{nome}' inválido. Jogos válidos: {list(JOGOS_DISPONIVEIS)}")
    return jogo_class()
