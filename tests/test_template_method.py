"""Testes do padrão Template Method."""
import pytest

from patterns.template_method import Jogo, Mario, Tankfight, criar_jogo


class JogoRegistrador(Jogo):
    def __init__(self):
        self.etapas = []

    def inicializar(self):
        self.etapas.append("inicializar")
        return "inicializar"

    def iniciar_partida(self):
        self.etapas.append("iniciar_partida")
        return "iniciar_partida"

    def encerrar_partida(self):
        self.etapas.append("encerrar_partida")
        return "encerrar_partida"


def test_etapas_executadas_uma_vez_na_ordem():
    jogo = JogoRegistrador()
    jogo.jogar()
    assert jogo.etapas == ["inicializar", "iniciar_partida", "encerrar_partida"]


@pytest.mark.parametrize("jogo_class,nome", [(Mario, "Mario"), (Tankfight, "Tankfight")])
def test_jogos_concretos(jogo_class, nome, capsys):
    mensagens = jogo_class().jogar()

    assert len(mensagens) == 3
    assert all(m.startswith(f"[{nome}]") for m in mensagens)
    assert "inicializado" in mensagens[0]
    assert "finalizado" in mensagens[2]
    assert capsys.readouterr().out.splitlines() == mensagens


def test_subclasse_nao_pode_sobrescrever_jogar():
    with pytest.raises(TypeError, match="jogar"):
        class JogoTrapaceiro(Mario):
            def jogar(self):
                return []


def test_jogo_abstrato_nao_instancia():
    with pytest.raises(TypeError):
        Jogo()


def test_criar_jogo_por_nome():
    assert isinstance(criar_jogo("Mario"), Mario)
    with pytest.raises(ValueError):
        criar_jogo("tetris")
