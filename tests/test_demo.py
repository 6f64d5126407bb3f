"""Testes do script de demonstrações no terminal."""
import demo


def test_main_executa_todas_as_demonstracoes(capsys):
    assert demo.main() == 0

    saida = capsys.readouterr().out
    assert "Verificação 'luzes' falhou" in saida
    assert "Todas as verificações passaram" in saida
    assert "Preço de todos os serviços: 2200" in saida
    assert "[Mario] Jogo finalizado!" in saida
