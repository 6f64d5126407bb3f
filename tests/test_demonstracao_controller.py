"""Testes das rotas HTTP de demonstração."""
import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from controllers.demonstracao_controller import DemonstracaoController
from main import app
from patterns.observer import ObserverNaoEncontrado


@pytest.fixture
def client():
    return TestClient(app)


def test_root_e_health(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert "chain" in client.get("/").json()["padroes_implementados"]


def test_chain_casa_segura(client):
    resposta = client.post("/demo/chain", json={"trancada": True, "luzes_apagadas": True, "alarme_ligado": True})
    assert resposta.status_code == 200
    assert resposta.json()["aprovado"] is True


def test_chain_falha_retorna_409(client):
    resposta = client.post("/demo/chain", json={"trancada": True, "luzes_apagadas": False, "alarme_ligado": False})
    assert resposta.status_code == 409
    assert resposta.json()["detail"]["verificacao"] == "luzes"


def test_decorator_com_servicos(client):
    resposta = client.get("/demo/decorator", params={"servicos": ["seo", "personalizado"]})
    assert resposta.status_code == 200
    assert resposta.json()["personalizado"]["custo"] == 2200


def test_decorator_servico_invalido(client):
    assert client.get("/demo/decorator", params={"servicos": ["hospedagem"]}).status_code == 400


def test_observer_login(client):
    resposta = client.post("/demo/observer/login")
    assert resposta.json()["notificacoes"][0] == "[login] Login realizado!!"


def test_strategy_destinos(client):
    assert client.get("/demo/strategy", params={"destino": "banco"}).status_code == 200
    assert client.get("/demo/strategy", params={"destino": "fax"}).status_code == 400


def test_template_e_adapter(client):
    assert list(client.get("/demo/template/tankfight").json()["partidas"]) == ["Tankfight"]
    assert client.get("/demo/template/tetris").status_code == 400
    assert client.get("/demo/adapter").status_code == 200


def test_observer_nao_encontrado_vira_404():
    def demonstracao():
        raise ObserverNaoEncontrado("Nenhum observer no índice 3")

    with pytest.raises(HTTPException) as excinfo:
        DemonstracaoController()._executar(demonstracao)
    assert excinfo.value.status_code == 404


def test_erro_inesperado_de_lookup_vira_500():
    def demonstracao():
        return {}["inexistente"]

    with pytest.raises(HTTPException) as excinfo:
        DemonstracaoController()._executar(demonstracao)
    assert excinfo.value.status_code == 500
