from event_scheduler.utils.validators import InputValidator, validate_date, validate_time


class TestDateValidation:
    """Test YYYY-MM-DD shape checks."""

    def test_valid_dates(self):
        """Well-shaped dates should pass."""
        for date in ["2024-01-01", "1999-12-31", "0000-00-00"]:
            assert InputValidator.validate_date(date) == True, f"{date} should be valid"

    def test_wrong_separator_invalid(self):
        """Slashes instead of dashes should fail."""
        assert validate_date("2024/01/01") == False

    def test_wrong_length_invalid(self):
        """Unpadded month makes the date too short."""
        assert validate_date("2024-1-01") == False
        assert validate_date("2024-01-011") == False
        assert validate_date("") == False

    def test_non_digits_invalid(self):
        """Letters in digit positions should fail."""
        for date in ["2O24-01-01", "2024-0a-01", "2024-01-0 ", "2024--01-01"]:
            assert validate_date(date) == False, f"{date} should be invalid"

    def test_non_ascii_digits_invalid(self):
        """Only ASCII digits count as digits."""
        assert validate_date("２０２４-01-01") == False

    def test_no_calendar_check(self):
        """Month 13 and day 99 have the right shape, so they pass."""
        assert validate_date("2024-13-99") == True


class TestTimeValidation:
    """Test HH:MM shape checks."""

    def test_valid_time(self):
        assert validate_time("09:30") == True
        assert InputValidator.validate_time("23:59") == True

    def test_unpadded_hour_invalid(self):
        assert validate_time("9:30") == False

    def test_wrong_separator_invalid(self):
        assert validate_time("09.30") == False
        assert validate_time("0930:") == False

    def test_no_range_check(self):
        """Hour 25 and minute 99 have the right shape, so they pass."""
        assert validate_time("25:99") == True

    def test_non_string_input_invalid(self):
        """Validators never raise."""
        assert validate_time(None) == False
        assert validate_date(20240101) == False
