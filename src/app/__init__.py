"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (persistir SMS, atualizar zonas)
- services/: serviços puros (parser do SMS)
- domain/: modelos de domínio (ParsedMessage, HeatingState, MessageRecord)
- infra/: implementações concretas de IO (store em memória, material TLS)
- protocols/: contratos/interfaces
- sessions/: sessão do data store e política de retry
- observability/: correlation_id dos logs
- constants/: gramática do SMS e zonas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
