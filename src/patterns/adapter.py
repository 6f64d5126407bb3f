"""
Padrão Adapter para leitura de livros em dispositivos diferentes
"""
from abc import ABC, abstractmethod
from typing import List


class Livro(ABC):
    """Interface esperada por quem lê"""

    @abstractmethod
    def ler(self) -> str:
        pass

    @abstractmethod
    def virar_pagina(self) -> str:
        pass


class LivroImpresso(Livro):
    def ler(self) -> str:
        mensagem = "[Livro] Abrindo o livro impresso."
        print(mensagem)
        return mensagem

    def virar_pagina(self) -> str:
        mensagem = "[Livro] Página virada."
        print(mensagem)
        return mensagem


class Kindle:
    """Dispositivo com interface incompatível com Livro"""

    def ligar(self) -> str:
        mensagem = "[Kindle] Ligando o Kindle."
        print(mensagem)
        return mensagem

    def pressionar_botao_avancar(self) -> str:
        mensagem = "[Kindle] Botão de avançar pressionado."
        print(mensagem)
        return mensagem


class Audiolivro:
    """Dispositivo sem conceito de página"""

    def reproduzir(self) -> str:
        mensagem = "[Audiolivro] Reproduzindo o capítulo."
        print(mensagem)
        return mensagem


class KindleAdapter(Livro):
    """Adapta o Kindle para a interface Livro"""

    def __init__(self, kindle: Kindle):
        self._kindle = kindle

    def ler(self) -> str:
        return self._kindle.ligar()

    def virar_pagina(self) -> str:
        return self._kindle.pressionar_botao_avancar()


class AudiolivroAdapter(Livro):
    """Adapta o Audiolivro; virar página não faz nada"""

    def __init__(self, audiolivro: Audiolivro):
        self._audiolivro = audiolivro

    def ler(self) -> str:
        return self._audiolivro.reproduzir()

    def virar_pagina(self) -> str:
        return ""


class Pessoa:
    """Cliente que só conhece a interface Livro"""

    def ler(self, livro: Livro) -> List[str]:
        mensagens = [livro.ler(), livro.virar_pagina()]
        return [m for m in mensagens if m]
