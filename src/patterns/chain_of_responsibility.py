"""
Padrão Chain of Responsibility para verificações de segurança da casa
"""
from abc import ABC, abstractmethod
from typing import Optional


class VerificacaoFalhou(Exception):
    """Lançada quando uma verificação da cadeia não passa"""

    def __init__(self, verificacao: str, mensagem: str):
        super().__init__(mensagem)
        self.verificacao = verificacao
        self.mensagem = mensagem


class StatusCasa:
    """Estado compartilhado entre os verificadores"""

    def __init__(self, trancada: bool = True, luzes_apagadas: bool = False, alarme_ligado: bool = False):
        self.trancada = trancada
        self.luzes_apagadas = luzes_apagadas
        self.alarme_ligado = alarme_ligado


class VerificadorCasa(ABC):
    """Nó da cadeia: verifica e repassa ao sucessor"""

    nome = "verificador"
    mensagem_falha = "Verificação falhou!"

    def __init__(self):
        self._sucessor: Optional["VerificadorCasa"] = None
        self.estado = "nao_executado"

    @abstractmethod
    def condicao(self, casa: StatusCasa) -> bool:
        pass

    def suceder_com(self, sucessor: "VerificadorCasa") -> "VerificadorCasa":
        """Define o próximo verificador e o retorna para encadear chamadas"""
        no = sucessor
        while no is not None:
            if no is self:
                raise ValueError(f"Cadeia cíclica: '{sucessor.nome}' já leva até '{self.nome}'")
            no = no._sucessor
        self._sucessor = sucessor
        return sucessor

    def reiniciar(self):
        """Volta este verificador e os seguintes para 'nao_executado'"""
        no = self
        while no is not None:
            no.estado = "nao_executado"
            no = no._sucessor

    def verificar(self, casa: StatusCasa):
        """Inicia uma nova passada pela cadeia a partir deste verificador"""
        self.reiniciar()
        self._executar(casa)

    def _executar(self, casa: StatusCasa):
        if not self.condicao(casa):
            self.estado = "reprovado"
            raise VerificacaoFalhou(self.nome, self.mensagem_falha)
        self.estado = "aprovado"
        print(f"[{self.nome.capitalize()}] OK")
        self.proximo(casa)

    def proximo(self, casa: StatusCasa):
        if self._sucessor is not None:
            self._sucessor._executar(casa)


class Trancas(VerificadorCasa):
    nome = "trancas"
    mensagem_falha = "As portas não estão trancadas!"

    def condicao(self, casa: StatusCasa) -> bool:
        return casa.trancada


class Luzes(VerificadorCasa):
    nome = "luzes"
    mensagem_falha = "As luzes estão acesas!"

    def condicao(self, casa: StatusCasa) -> bool:
        return casa.luzes_apagadas


class Alarme(VerificadorCasa):
    nome = "alarme"
    mensagem_falha = "O alarme não está ligado!"

    def condicao(self, casa: StatusCasa) -> bool:
        return casa.alarme_ligado


def montar_cadeia(*verificadores: VerificadorCasa) -> VerificadorCasa:
    """Liga os verificadores na ordem recebida e retorna o primeiro"""
    if not verificadores:
        raise ValueError("Informe ao menos um verificador")
    for atual, seguinte in zip(verificadores, verificadores[1:]):
        atual.suceder_com(seguinte)
    return verificadores[0]
