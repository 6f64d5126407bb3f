from abc import ABC, abstractmethod
from typing import List


class DesignSite(ABC):
    """Interface Component do padrão Decorator"""

    @abstractmethod
    def get_custo(self) -> float:
        pass

    @abstractmethod
    def get_descricao(self) -> str:
        pass


class DesignBasico(DesignSite):
    def __init__(self, custo: float = 1000):
        self._custo = custo

    def get_custo(self) -> float:
        return self._custo

    def get_descricao(self) -> str:
        return "Design Básico"


class DesignDecorator(DesignSite):
    """Decorator base para serviços adicionais"""

    def __init__(self, design: DesignSite):
        self._design = design

    def get_custo(self) -> float:
        return self._design.get_custo()

    def get_descricao(self) -> str:
        return self._design.get_descricao()


# Decorators concretos
class DesignPersonalizado(DesignDecorator):
    def get_custo(self) -> float:
        return 500 + self._design.get_custo()

    def get_descricao(self) -> str:
        return self._design.get_descricao() + " + Design Personalizado"


class SEO(DesignDecorator):
    def get_custo(self) -> float:
        return 700 + self._design.get_custo()

    def get_descricao(self) -> str:
        return self._design.get_descricao() + " + SEO"


class ServicoAdicional(DesignDecorator):
    """Decorator genérico para serviços com custo informado"""

    def __init__(self, design: DesignSite, nome: str, custo: float = 0.0):
        super().__init__(design)
        self._nome = nome
        self._custo = custo

    def get_custo(self) -> float:
        return self._custo + self._design.get_custo()

    def get_descricao(self) -> str:
        return f"{self._design.get_descricao()} + {self._nome}"


SERVICOS_DISPONIVEIS = {
    "personalizado": DesignPersonalizado,
    "seo": SEO,
}


def aplicar_servicos(design: DesignSite, nomes: List[str]) -> DesignSite:
    """Aplica os serviços na ordem informada usando os decorators apropriados."""
    for nome in nomes:
        decorator_class = SERVICOS_DISPONIVEIS.get(nome.strip().lower())
        if decorator_class is None:
            raise ValueError(
                f"Serviço '{nome}' inválido. Serviços válidos: {list(SERVICOS_DISPONIVEIS)}"
            )
        design = decorator_class(design)
    return design
