"""API — camada de borda do gateway SMS e do data store.

Responsabilidades:
- Receber o webhook do gateway SMS
- Validar envelope e remetente
- Normalizar o payload para o modelo interno
- Falar HTTP com o PocketBase

Subpastas:
- connectors/: adapters HTTP (PocketBase)
- normalizers/: conversão de payloads externos → modelos internos
- validators/: validação de envelope e remetente
- routes/: endpoints HTTP (webhook SMS, health)

NÃO PODE conter: parse do texto do SMS, regras de sessão, orquestração de use cases.
"""
