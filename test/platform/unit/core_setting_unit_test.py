import pytest
from pydantic import ValidationError

from src.platform.config.core_setting import Settings


class TestSettings:
    @pytest.mark.unit
    def test_default_coach_configuration(self):
        config = Settings()

        assert config.COACH_FULL_ROWS == 11
        assert config.COACH_SEATS_PER_ROW == 7
        assert config.COACH_LAST_ROW_SEATS == 3
        assert config.MAX_PARTY_SIZE == 7

    @pytest.mark.unit
    def test_values_come_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('MAX_PARTY_SIZE', '4')
        monkeypatch.setenv('COACH_FULL_ROWS', '9')

        config = Settings()

        assert config.MAX_PARTY_SIZE == 4
        assert config.COACH_FULL_ROWS == 9

    @pytest.mark.unit
    def test_rejects_non_positive_party_size(self):
        with pytest.raises(ValidationError):
            Settings(MAX_PARTY_SIZE=0)

    @pytest.mark.unit
    def test_rejects_negative_last_row(self):
        with pytest.raises(ValidationError):
            Settings(COACH_LAST_ROW_SEATS=-1)
