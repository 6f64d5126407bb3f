"""
Controller para as demonstrações dos padrões (padrão MVC)
Padrões GoF
"""
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from patterns.business_object import DemonstracaoBO
from patterns.chain_of_responsibility import StatusCasa
from patterns.observer import ObserverNaoEncontrado


class StatusCasaRequest(BaseModel):
    """Schema com o estado da casa a verificar"""
    trancada: bool = True
    luzes_apagadas: bool = False
    alarme_ligado: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "trancada": True,
                "luzes_apagadas": True,
                "alarme_ligado": True
            }
        }


class VerificacaoResponse(BaseModel):
    """Schema de resposta da cadeia de verificações"""
    padrao: str
    descricao: str
    aprovado: bool
    falha: Optional[str] = None
    verificacao: Optional[str] = None
    estados: Dict[str, str]


class DemonstracaoController:
    """Controller que expõe cada demonstração como uma rota"""

    def __init__(self):
        self.router = APIRouter(prefix="/demo", tags=["Demonstrações"])
        self.bo = DemonstracaoBO()
        self._setup_routes()

    def _setup_routes(self):
        """Configura as rotas do controller"""

        @self.router.get("/")
        async def listar_demonstracoes():
            """Lista as demonstrações disponíveis"""
            return self.bo.listar_padroes()

        @self.router.get("/adapter")
        async def demo_adapter():
            """Demonstração do padrão Adapter"""
            return self._executar(self.bo.demonstrar_adapter)

        @self.router.post("/chain", response_model=VerificacaoResponse)
        async def demo_chain(dados: StatusCasaRequest):
            """
            Demonstração do padrão Chain of Responsibility.
            Retorna 409 com a verificação que falhou.
            """
            resultado = self._executar(
                self.bo.verificar_casa,
                StatusCasa(dados.trancada, dados.luzes_apagadas, dados.alarme_ligado)
            )
            if not resultado["aprovado"]:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail={"verificacao": resultado["verificacao"], "mensagem": resultado["falha"]}
                )
            return resultado

        @self.router.get("/decorator")
        async def demo_decorator(
            servicos: Optional[List[str]] = Query(None, description="Serviços a aplicar: personalizado, seo")
        ):
            """Demonstração do padrão Decorator"""
            return self._executar(self.bo.demonstrar_decorator, servicos)

        @self.router.post("/observer/login")
        async def demo_observer():
            """Demonstração do padrão Observer"""
            return self._executar(self.bo.demonstrar_observer)

        @self.router.get("/strategy")
        async def demo_strategy(
            destino: Optional[str] = Query(None, description="Destino do log: arquivo, banco, web")
        ):
            """Demonstração do padrão Strategy"""
            return self._executar(self.bo.demonstrar_strategy, destino)

        @self.router.get("/template/{jogo}")
        async def demo_template(jogo: str):
            """Demonstração do padrão Template Method"""
            return self._executar(self.bo.demonstrar_template, jogo)

    def _executar(self, demonstracao, *args) -> Dict[str, Any]:
        """Executa a demonstração traduzindo erros para HTTP"""
        try:
            return demonstracao(*args)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )
        except ObserverNaoEncontrado as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e)
            )
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Erro na demonstração: {str(e)}"
            )
