"""User-facing messages shown through the ErrorReporter."""

USER_NOT_FOUND = "Usuário não encontrado."
SEARCH_FAILED = "Ocorreu um erro ao buscar o usuário."
REDIRECT_FAILED = "Ocorreu um erro ao redirecionar."
GENERIC_ERROR = "Ocorreu um erro."

ORGS_FETCH_FAILED = "Ocorreu um erro ao buscar organizações."
ORGS_LINK_FAILED = "Ocorreu um erro ao redirecionar para organização."

REPOS_FETCH_FAILED = "Ocorreu um erro ao visualizar o repositório."
REPOS_LINK_FAILED = "Ocorreu um erro ao redirecionar para os repositórios."

FOLLOWERS_FAILED = "Ocorreu um erro ao redirecionar para os seguidores."
