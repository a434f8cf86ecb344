"""
Core do confbuilders.

Componentes principais:
    - section    → registros, coleção, snapshot e handlers de seção
    - builder    → driver de aplicação de pares chave/valor
    - config     → resolução de configuração (load, merge, hashing)
    - errors     → payloads canônicos de erro
    - exceptions → exceções tipadas internas

Princípios fundamentais:
    - Toda leitura da seção viva passa por snapshot
    - Nenhuma correção silenciosa: valores inválidos são rejeitados
      antes de qualquer mutação
    - Nenhum estado é mantido entre chamadas além da própria seção
"""
