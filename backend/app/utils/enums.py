from enum import Enum


class Gender(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    moderate = "moderate"
    active = "active"


class BMICategory(str, Enum):
    # Ordered by severity; thresholds live in app.services.bmi_service
    underweight = "Underweight"
    normal = "Normal"
    overweight = "Overweight"
    obese = "Obese"

    @property
    def severity(self) -> int:
        return list(BMICategory).index(self)


class IdentitySource(str, Enum):
    google = "google"
    guest = "guest"
