#!/usr/bin/env python3
"""
Script que executa todas as demonstrações no terminal
Cada padrão roda isolado; a falha esperada da cadeia é apenas reportada
"""
import sys

from patterns.business_object import DemonstracaoBO
from patterns.chain_of_responsibility import StatusCasa


def executar_demonstracoes(bo: DemonstracaoBO) -> int:
    """Executa as seis demonstrações e retorna o código de saída"""
    demonstracoes = [
        ("🔌 Adapter", bo.demonstrar_adapter),
        ("⛓️  Chain of Responsibility (casa padrão)", bo.verificar_casa),
        ("⛓️  Chain of Responsibility (casa segura)",
         lambda: bo.verificar_casa(StatusCasa(trancada=True, luzes_apagadas=True, alarme_ligado=True))),
        ("🎨 Decorator", bo.demonstrar_decorator),
        ("👁️  Observer", bo.demonstrar_observer),
        ("📝 Strategy", bo.demonstrar_strategy),
        ("🎮 Template Method", bo.demonstrar_template),
    ]

    for titulo, demonstracao in demonstracoes:
        print(f"\n{titulo}")
        print("-" * 60)
        try:
            resultado = demonstracao()
        except Exception as e:
            print(f"❌ Erro inesperado: {e}")
            return 1

        if resultado.get("aprovado") is False:
            print(f"⚠️  Verificação '{resultado['verificacao']}' falhou: {resultado['falha']}")
        elif "precos" in resultado:
            precos = resultado["precos"]
            print(f"Preço do design básico: {precos['basico']}")
            print(f"Preço do design personalizado e básico: {precos['personalizado']}")
            print(f"Preço do SEO e design básico: {precos['seo']}")
            print(f"Preço de todos os serviços: {precos['completo']}")
        elif "aprovado" in resultado:
            print("✅ Todas as verificações passaram!")

    return 0


def main():
    """Função principal"""
    print("🏪 Demonstrações de Padrões GoF")
    print("=" * 60)

    codigo = executar_demonstracoes(DemonstracaoBO())

    print("\n🎉 Demonstrações concluídas!" if codigo == 0 else "\n❌ Demonstrações interrompidas!")
    print("🚀 Execute: python main.py para a versão HTTP")
    return codigo


if __name__ == "__main__":
    sys.exit(main())
