"""Testes do padrão Decorator."""
import pytest

from patterns.decorator import (
    SEO, DesignBasico, DesignPersonalizado, ServicoAdicional, aplicar_servicos
)


def test_precos_do_exemplo():
    assert DesignBasico().get_custo() == 1000
    assert DesignPersonalizado(DesignBasico()).get_custo() == 1500
    assert SEO(DesignBasico()).get_custo() == 1700
    assert SEO(DesignPersonalizado(DesignBasico())).get_custo() == 2200


def test_ordem_dos_decorators_nao_altera_o_total():
    a = SEO(DesignPersonalizado(DesignBasico()))
    b = DesignPersonalizado(SEO(DesignBasico()))

    assert a.get_custo() == b.get_custo() == 2200
    assert a.get_descricao() == "Design Básico + Design Personalizado + SEO"
    assert b.get_descricao() == "Design Básico + SEO + Design Personalizado"


def test_servico_adicional_generico():
    design = ServicoAdicional(SEO(DesignBasico()), "Hospedagem", 300)
    assert design.get_custo() == 2000
    assert design.get_descricao().endswith("+ Hospedagem")


def test_aplicar_servicos_por_nome():
    design = aplicar_servicos(DesignBasico(), ["SEO", " personalizado "])
    assert design.get_custo() == 2200
    assert aplicar_servicos(DesignBasico(), []).get_custo() == 1000


def test_aplicar_servico_invalido():
    with pytest.raises(ValueError, match="inválido"):
        aplicar_servicos(DesignBasico(), ["hospedagem"])
