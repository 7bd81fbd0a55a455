class InsightsError(Exception):
    """Базовая ошибка сервиса инсайтов."""


class AuthenticationError(InsightsError):
    """Не удалось определить вызывающего пользователя."""


class NotFoundError(InsightsError):
    """Профиль пользователя не найден."""


class ProfileIncompleteError(InsightsError):
    """В профиле не указана отрасль."""


class RemoteCapabilityError(InsightsError):
    """Не ответила ни основная, ни резервная модель."""


class MalformedOutputError(InsightsError):
    """
    Ответ модели не удалось разобрать.

    Наружу не выбрасывается: генератор подставляет запасные данные.
    """
