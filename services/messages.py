"""Guidance text attached to BMI and body-fat results."""

from core.logger import get_logger

logger = get_logger("services.messages")

BMI_MESSAGES = {
    "underweight": "Your BMI indicates that you are underweight. Consider consulting with a nutritionist.",
    "normal": "Your BMI indicates that you have a normal weight. Maintain your healthy lifestyle!",
    "overweight": "Your BMI indicates that you are overweight. Consider increasing physical activity.",
    "obese": "Your BMI indicates obesity. It is recommended to consult with a healthcare professional.",
}

BODY_FAT_MESSAGES = {
    "essential": "You are in the essential fat range. This is the minimum needed for basic health.",
    "athletic": "You're in the athletic range, which is ideal for athletes and fitness models.",
    "fitness": "You're in the fitness range, which is associated with good health.",
    "average": "You're in the average range. Reducing body fat may improve health markers.",
}

INVALID_BMI_MESSAGE = "Invalid BMI category."
INVALID_BODY_FAT_MESSAGE = "Invalid body fat category."


def bmi_message(category: str) -> str:
    message = BMI_MESSAGES.get(category)
    if message is None:
        logger.warning("No BMI message for category %r", category)
        return INVALID_BMI_MESSAGE
    return message


def body_fat_message(category: str) -> str:
    message = BODY_FAT_MESSAGES.get(category)
    if message is None:
        logger.warning("No body fat message for category %r", category)
        return INVALID_BODY_FAT_MESSAGE
    return message
