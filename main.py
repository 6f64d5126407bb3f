"""
Aplicação principal das demonstrações de Padrões GoF
Expõe cada demonstração como rota HTTP
"""
import uvicorn # type: ignore
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import configuracao
from controllers.demonstracao_controller import DemonstracaoController
from patterns.business_object import DemonstracaoBO


# Configuração da aplicação principal
app = FastAPI(
    title=configuracao.APP_TITULO,
    description="""
    Demonstrações independentes de padrões de projeto:

    - 🔌 Adapter: Leitura de livros em dispositivos diferentes
    - ⛓️ Chain of Responsibility: Verificações de segurança da casa
    - 🎨 Decorator: Preço de sites com serviços adicionais
    - 👁️ Observer: Notificações disparadas pelo login
    - 📝 Strategy: Destinos de log intercambiáveis
    - 🎮 Template Method: Ciclo de vida de um jogo
    """,
    version=configuracao.APP_VERSAO
)

# Configuração CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=configuracao.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Incluir rotas do controller
demonstracao_controller = DemonstracaoController()
app.include_router(demonstracao_controller.router)


@app.get("/")
async def root():
    """Endpoint raiz com informações do sistema"""
    return {
        "message": f"🏪 {configuracao.APP_TITULO} - Demonstrações",
        "version": configuracao.APP_VERSAO,
        "padroes_implementados": DemonstracaoBO().listar_padroes(),
        "endpoints": {
            "documentacao": "/docs",
            "demonstracoes": "/demo/*",
        }
    }


@app.get("/health")
async def health_check():
    """Verifica saúde da aplicação"""
    return {
        "status": "healthy",
        "patterns": "implemented"
    }


if __name__ == "__main__":
    print("🏪 Iniciando demonstrações de Padrões GoF...")
    print(f"📖 Acesse http://localhost:{configuracao.APP_PORT}/docs para documentação")

    uvicorn.run(
        "main:app",
        host=configuracao.APP_HOST,
        port=configuracao.APP_PORT,
        reload=configuracao.APP_RELOAD,
        log_level=configuracao.APP_LOG_LEVEL
    )
