"""
Padrão Business Object para orquestrar as demonstrações
Cada método monta o cenário de um padrão GoF e devolve um dict serializável
"""
from typing import Any, Dict, List, Optional

from .adapter import Audiolivro, AudiolivroAdapter, Kindle, KindleAdapter, LivroImpresso, Pessoa
from .chain_of_responsibility import Alarme, Luzes, StatusCasa, Trancas, VerificacaoFalhou, montar_cadeia
from .decorator import SEO, DesignBasico, DesignPersonalizado, aplicar_servicos
from .observer import EmailHandler, Login, LoginHandler, RelatorioHandler
from .strategy import App, LogParaArquivo, LogParaBancoDeDados, LogParaWebService, StrategySelector
from .template_method import Mario, Tankfight, criar_jogo


PADROES_DISPONIVEIS = {
    "adapter": "Leitura de livros em dispositivos incompatíveis",
    "chain": "Verificações de segurança da casa em sequência",
    "decorator": "Preço de sites com serviços adicionais",
    "observer": "Notificações disparadas pelo login",
    "strategy": "Destinos de log intercambiáveis",
    "template": "Ciclo de vida fixo de um jogo",
}


class DemonstracaoBO:

    def listar_padroes(self) -> Dict[str, str]:
        return dict(PADROES_DISPONIVEIS)

    def demonstrar_adapter(self) -> Dict[str, Any]:
        """Uma pessoa lê um livro impresso, um Kindle e um audiolivro"""
        pessoa = Pessoa()
        return {
            "padrao": "Adapter Pattern",
            "descricao": PADROES_DISPONIVEIS["adapter"],
            "leituras": {
                "livro_impresso": pessoa.ler(LivroImpresso()),
                "kindle": pessoa.ler(KindleAdapter(Kindle())),
                "audiolivro": pessoa.ler(AudiolivroAdapter(Audiolivro())),
            },
        }

    def verificar_casa(self, status: Optional[StatusCasa] = None) -> Dict[str, Any]:
        """Executa a cadeia trancas -> luzes -> alarme sem propagar a falha"""
        status = status or StatusCasa()
        trancas, luzes, alarme = Trancas(), Luzes(), Alarme()
        cadeia = montar_cadeia(trancas, luzes, alarme)
        resultado: Dict[str, Any] = {
            "padrao": "Chain of Responsibility Pattern",
            "descricao": PADROES_DISPONIVEIS["chain"],
            "aprovado": True,
            "falha": None,
            "verificacao": None,
        }
        try:
            cadeia.verificar(status)
        except VerificacaoFalhou as e:
            resultado.update(aprovado=False, falha=e.mensagem, verificacao=e.verificacao)
        resultado["estados"] = {v.nome: v.estado for v in (trancas, luzes, alarme)}
        return resultado

    def demonstrar_decorator(self, servicos: Optional[List[str]] = None) -> Dict[str, Any]:
        """Preços do pacote básico, de cada serviço e do pacote completo"""
        precos = {
            "basico": DesignBasico().get_custo(),
            "personalizado": DesignPersonalizado(DesignBasico()).get_custo(),
            "seo": SEO(DesignBasico()).get_custo(),
            "completo": SEO(DesignPersonalizado(DesignBasico())).get_custo(),
        }
        resultado: Dict[str, Any] = {
            "padrao": "Decorator Pattern",
            "descricao": PADROES_DISPONIVEIS["decorator"],
            "precos": precos,
        }
        if servicos:
            design = aplicar_servicos(DesignBasico(), servicos)
            resultado["personalizado"] = {
                "descricao": design.get_descricao(),
                "custo": design.get_custo(),
            }
        return resultado

    def demonstrar_observer(self) -> Dict[str, Any]:
        login = Login()
        login.anexar([LoginHandler(), EmailHandler(), RelatorioHandler()])
        return {
            "padrao": "Observer Pattern",
            "descricao": PADROES_DISPONIVEIS["observer"],
            "observers": [type(o).__name__ for o in login.observers],
            "notificacoes": login.disparar(),
        }

    def demonstrar_strategy(self, destino: Optional[str] = None) -> Dict[str, Any]:
        """Sem destino, registra com as três strategies e com o padrão do App"""
        app = App()
        if destino:
            strategy = StrategySelector.criar_strategy(destino)
            registros = {strategy.get_descricao(): app.log("Log", strategy)}
        else:
            registros = {
                s.get_descricao(): app.log("Log", s)
                for s in (LogParaArquivo(), LogParaBancoDeDados(), LogParaWebService())
            }
            registros["padrao"] = app.log("Log")
        return {
            "padrao": "Strategy Pattern",
            "descricao": PADROES_DISPONIVEIS["strategy"],
            "registros": registros,
        }

    def demonstrar_template(self, jogo: Optional[str] = None) -> Dict[str, Any]:
        jogos = [criar_jogo(jogo)] if jogo else [Tankfight(), Mario()]
        return {
            "padrao": "Template Method Pattern",
            "descricao": PADROES_DISPONIVEIS["template"],
            "partidas": {type(j).__name__: j.jogar() for j in jogos},
        }
