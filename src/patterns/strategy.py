from abc import ABC, abstractmethod
from typing import Optional


class Logger(ABC):
    """Interface Strategy para registro de dados"""

    @abstractmethod
    def log(self, dados) -> str:
        """Registra os dados no destino da strategy"""
        pass

    @abstractmethod
    def get_descricao(self) -> str:
        pass


class LogParaArquivo(Logger):
    """Strategy concreta que simula gravação em arquivo"""

    def log(self, dados) -> str:
        mensagem = f"[Arquivo] Registrando '{dados}' no arquivo"
        print(mensagem)
        return mensagem

    def get_descricao(self) -> str:
        return "Log em arquivo"


class LogParaBancoDeDados(Logger):
    """Strategy concreta que simula gravação no banco"""

    def log(self, dados) -> str:
        mensagem = f"[Banco] Registrando '{dados}' no banco de dados"
        print(mensagem)
        return mensagem

    def get_descricao(self) -> str:
        return "Log em banco de dados"


class LogParaWebService(Logger):
    """Strategy concreta que simula envio a um web service"""

    def log(self, dados) -> str:
        mensagem = f"[WebService] Enviando '{dados}' ao web service"
        print(mensagem)
        return mensagem

    def get_descricao(self) -> str:
        return "Log em web service"


class App:
    """Contexto que usa as strategies de log"""

    def log(self, dados, logger: Optional[Logger] = None) -> str:
        """Registra com a strategy informada ou, na falta dela, em arquivo"""
        logger = logger or LogParaArquivo()
        return logger.log(dados)


class StrategySelector:
    """Selector para escolher a strategy pelo destino"""

    _strategies = {
        "arquivo": LogParaArquivo,
        "banco": LogParaBancoDeDados,
        "web": LogParaWebService,
    }

    @classmethod
    def criar_strategy(cls, destino: str) -> Logger:
        strategy_class = cls._strategies.get(destino.lower())
        if strategy_class is None:
            raise ValueError(f"Destino '{destino}' inválido. Destinos válidos: {list(cls._strategies)}")
        return strategy_class()

    @classmethod
    def destinos(cls) -> list:
        return list(cls._strategies)
