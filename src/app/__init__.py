"""App — colaboradores externos da máquina de estados e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- infra/: implementações concretas de IO (stores, notifiers)
- protocols/: contratos/interfaces consumidos pelo core
- observability/: correlation_id para logs estruturados

Padrão: fsm governa; app persiste e notifica; config e utils apoiam.
"""
