"""Pacote de notificação de CI -> webhook do Discord.

Este pacote contém:
- constants: variáveis de ambiente, cores e rótulos por severidade
- inputs: fontes de configuração (GitHub Actions, dict, cadeia)
- reporting: canais de warning/notice
- fields: validação do input 'fields'
- flags: flags de mensagem do Discord
- formatters: montagem do payload (texto e embed)
- holddown: intervalo mínimo entre envios
- services: cliente do webhook do Discord
- controller: controle de envio e ponto de entrada run()
- webapp: criação do Flask app e endpoints
- cli: envio único pela linha de comando
"""
