"""Testes do padrão Strategy."""
import pytest

from patterns.strategy import (
    App, LogParaArquivo, LogParaBancoDeDados, LogParaWebService, StrategySelector
)


def test_cada_strategy_produz_saida_propria(capsys):
    app = App()
    saidas = [
        app.log("Log", LogParaArquivo()),
        app.log("Log", LogParaBancoDeDados()),
        app.log("Log", LogParaWebService()),
    ]

    assert len(set(saidas)) == 3
    assert capsys.readouterr().out.splitlines() == saidas


def test_sem_strategy_usa_arquivo():
    app = App()
    assert app.log("dados") == LogParaArquivo().log("dados")


def test_selector_por_destino():
    assert isinstance(StrategySelector.criar_strategy("banco"), LogParaBancoDeDados)
    assert isinstance(StrategySelector.criar_strategy("WEB"), LogParaWebService)
    assert StrategySelector.destinos() == ["arquivo", "banco", "web"]
    with pytest.raises(ValueError):
        StrategySelector.criar_strategy("fax")
