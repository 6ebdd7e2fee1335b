"""
Fallback Care Plan Templates
----------------------------
Deterministic plan text used whenever the LLM call is unavailable or fails.

Dispatch is two-level:
1. plan category (nutrition, training, health, activities, grooming, social, or the generic renderer)
2. species (dog, cat, or the shared "other species" template of that category)

Every renderer is pure: same profile + category in, same text out. Nothing here may raise,
the profile already degrades unparseable numbers to defaults (age=1, weight=10).
"""

import logging
import math
from typing import Callable, Dict, Optional

from pet_profile import PetProfile, PlanCategory, Species

logger = logging.getLogger(__name__)

PET_EMOJI = {
    "dog": "🐕",
    "cat": "🐱",
    "bird": "🐦",
    "fish": "🐠",
    "rabbit": "🐰",
}

ACTIVITY_EMOJI = {
    "high": "🏃",
    "low": "😴",
    "moderate": "🚶",
}

PLAN_EMOJI = {
    PlanCategory.NUTRITION: "🍖",
    PlanCategory.TRAINING: "🎾",
    PlanCategory.HEALTH: "⚕️",
    PlanCategory.ACTIVITIES: "🏞️",
    PlanCategory.GROOMING: "🛁",
    PlanCategory.SOCIAL: "🐩",
}
GENERIC_PLAN_EMOJI = "📋"

# Activity multipliers applied to caloric need
CALORIE_MULTIPLIER = {"low": 0.8, "moderate": 1.0, "high": 1.2}


def round_half_up(value: float) -> int:
    """Round like the web client does (0.5 always rounds up)."""
    return int(math.floor(value + 0.5))


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _breed_matches(breed_lc: str, names) -> bool:
    return any(name in breed_lc for name in names)


# ============================================================================
# Shared blocks
# ============================================================================

def _pet_emoji(profile: PetProfile) -> str:
    return PET_EMOJI.get(profile.species_name, "🐾")


def _activity_line(profile: PetProfile) -> str:
    return f"- **Activity Level:** {profile.activity_level} {ACTIVITY_EMOJI[profile.activity_tier]}"


def _profile_block(profile: PetProfile, *extra_lines: str) -> str:
    """Pet Profile section for dogs and cats."""
    lines = [
        "## Pet Profile",
        f"- **Age:** {profile.age_years} years ({profile.age_category})",
        f"- **Weight:** {profile.weight_units} lbs",
        f"- **Size:** {profile.size.label}",
        _activity_line(profile),
    ]
    lines.extend(extra_lines)
    return "\n".join(lines)


def _other_profile_block(profile: PetProfile, include_weight: bool = True) -> str:
    """Pet Profile section for species without a dedicated template; lists the raw fields."""
    lines = [
        "## Pet Profile",
        f"- **Species:** {profile.species_label}",
        f"- **Breed:** {profile.breed_label}",
        f"- **Age:** {profile.age_years} years",
    ]
    if include_weight:
        lines.append(f"- **Weight:** {profile.weight_units} lbs")
    lines.append(_activity_line(profile))
    return "\n".join(lines)


def _inline_notes_placeholder(profile: PetProfile, placeholder: str) -> str:
    """Inline bullet used by nutrition and health when the owner left no notes."""
    return "" if profile.has_notes else f"\n- {placeholder}"


def _owner_notes_section(profile: PetProfile) -> str:
    """Trailing section echoing the owner's notes, only present when there are notes."""
    if not profile.has_notes:
        return ""
    return f"\n\n## 📌 Special Considerations\n- {profile.notes}"


def _trailing_notes_block(profile: PetProfile, placeholder: str) -> str:
    """Trailing section used by training/activities/grooming/social: notes or a placeholder."""
    body = profile.notes if profile.has_notes else placeholder
    return f"\n\n## 📌 Special Considerations\n- {body}"


def _nutrition_notes(profile: PetProfile) -> str:
    return (_inline_notes_placeholder(profile, "No specific dietary restrictions noted")
            + _owner_notes_section(profile))


def _health_notes(profile: PetProfile) -> str:
    return _inline_notes_placeholder(profile, "No specific health concerns noted") + _owner_notes_section(profile)


def _training_notes(profile: PetProfile) -> str:
    return _trailing_notes_block(profile, "No specific training challenges noted")


def _activity_notes(profile: PetProfile) -> str:
    return _trailing_notes_block(profile, "No specific activity restrictions noted")


def _grooming_notes(profile: PetProfile) -> str:
    return _trailing_notes_block(profile, "No specific grooming challenges noted")


def _social_notes(profile: PetProfile) -> str:
    return _trailing_notes_block(profile, "No specific socialization challenges noted")


# ============================================================================
# Nutrition
# ============================================================================

LARGE_DOG_BREEDS = ["german shepherd", "labrador", "golden retriever", "rottweiler", "husky"]
SMALL_DOG_BREEDS = ["chihuahua", "pomeranian", "shih tzu", "yorkshire", "dachshund", "pug"]


def _daily_calories(profile: PetProfile, per_lb: int) -> int:
    return round_half_up(profile.weight_units * per_lb * CALORIE_MULTIPLIER[profile.activity_tier])


def _dog_nutrition(profile: PetProfile) -> str:
    weight = profile.weight_units
    breed = profile.breed_label
    breed_lc = breed.lower()
    age_category = profile.age_category
    calories = _daily_calories(profile, 30)

    meal_oz = round_half_up(weight * 0.15)
    daily_oz = round_half_up(weight * 0.30)

    if profile.activity_tier == "high":
        portion_note = "High activity level: increase portions by 15-20% and watch body condition weekly"
    elif profile.activity_tier == "low":
        portion_note = "Low activity level: decrease portions by 10-15% to prevent weight gain"
    else:
        portion_note = "Moderate activity level: these portions should maintain a healthy weight"

    if age_category == "puppy":
        bedtime_group = "puppies"
        formula = "Puppy formula"
        age_note = "Puppies need frequent small meals - consider splitting the portions into 3-4 feedings per day"
    elif age_category == "senior dog":
        bedtime_group = "senior dogs"
        formula = "Senior formula"
        age_note = "Senior dogs may benefit from softer food or adding warm water to kibble"
    else:
        bedtime_group = "adult dogs"
        formula = "Adult maintenance formula"
        age_note = "Adult dogs generally do well with twice daily feeding"

    if profile.age_years > 7:
        age_supplement = "Glucosamine/chondroitin for senior joint health"
    else:
        age_supplement = f"Multivitamin formulated for {age_category}s"

    if profile.activity_tier == "high":
        activity_note = ("Your dog's high activity level means they need extra calories - "
                         "adjust portions if they seem hungry or lose weight")
    elif profile.activity_tier == "low":
        activity_note = ("Your dog's lower activity level means careful portion control "
                         "is important to prevent weight gain")
    else:
        activity_note = "Monitor weight monthly and adjust portions as needed"

    breed_specific = ""
    if _breed_matches(breed_lc, LARGE_DOG_BREEDS):
        breed_specific = (
            f"\n\n## {breed}-Specific Considerations 🧬\n"
            "- Large breed formula recommended to support joint health\n"
            "- Consider glucosamine supplements for joint support\n"
            "- Watch for signs of bloat - feed smaller, more frequent meals\n"
            "- Avoid rapid weight gain especially during growth phases"
        )
    elif _breed_matches(breed_lc, SMALL_DOG_BREEDS):
        breed_specific = (
            f"\n\n## {breed}-Specific Considerations 🧬\n"
            "- Small breed formula with smaller kibble size recommended\n"
            "- Higher calorie density food may be needed due to faster metabolism\n"
            "- More frequent meals to prevent hypoglycemia\n"
            "- Dental health is especially important - consider dental treats"
        )

    brand_breed = breed.split(" ")[0] if " " in breed else breed

    profile_block = _profile_block(profile, f"- **Daily Caloric Need:** Approximately {calories} calories")

    return f"""# {_pet_emoji(profile)} Personalized Diet Plan for {breed} Dog

{profile_block}

## 📅 Daily Feeding Schedule

### 🌅 Morning (6:00-8:00 AM)
- Main meal: {meal_oz} oz of high-quality dog food ({round_half_up(calories * 0.4)} calories)
- Add 1 tablespoon plain yogurt for probiotics
- Fresh water refill

### 🕛 Midday (11:30 AM-1:00 PM)
- Healthy treat: 1 medium carrot or apple slice (no seeds)
- Brief walk and water refresh

### 🌇 Afternoon (4:00-5:00 PM)
- Small training treats during short training session (keep under {round_half_up(calories * 0.05)} calories)
- Interactive puzzle toy with small amount of kibble

### 🌙 Evening (6:30-7:30 PM)
- Second main meal: {meal_oz} oz of high-quality dog food ({round_half_up(calories * 0.4)} calories)
- Add 1 teaspoon fish oil for coat health
- Fresh water refill

### 🌠 Night (Before Bed)
- Optional small bedtime treat for {bedtime_group} (keep under {round_half_up(calories * 0.03)} calories)
- One last bathroom break

## ⚖️ Daily Portions
- Morning meal: {meal_oz} oz
- Evening meal: {meal_oz} oz
- Total daily food: {daily_oz} oz
- {portion_note}

## 🥩 Recommended Foods

### Kibble Options
- {formula}
- Options: Royal Canin {brand_breed} Formula, Hill's Science Diet, or Purina Pro Plan

### Fresh Additions
- Lean protein: Cooked chicken, turkey, or fish (no bones)
- Vegetables: Carrots, green beans, pumpkin
- Fruits (occasional): Blueberries, apple slices (no seeds)

## 💧 Hydration
- Provide access to fresh, clean water at all times
- Wash bowl daily and refill at least twice per day
- For picky drinkers, consider pet fountain

## 💊 Supplements
- Omega-3 fatty acids: 1,000mg daily for joint health and coat
- {age_supplement}
- Probiotics to support digestive health{breed_specific}

## 📝 Special Notes
- {activity_note}
- {age_note}{_nutrition_notes(profile)}"""


def _cat_nutrition(profile: PetProfile) -> str:
    weight = profile.weight_units
    breed = profile.breed_label
    breed_lc = breed.lower()
    calories = _daily_calories(profile, 20)

    meal_oz = round_half_up(weight * 0.10)
    daily_oz = round_half_up(weight * 0.20)

    if profile.activity_tier == "high":
        portion_note = "High activity level: increase portions by 10-15% and monitor body condition"
        activity_note = "Very active cats may need up to 20% more calories - monitor weight and body condition"
    elif profile.activity_tier == "low":
        portion_note = "Low activity level: decrease portions by 10-15% to prevent obesity"
        activity_note = "Indoor cats with low activity need careful portion control to prevent obesity"
    else:
        portion_note = "Moderate activity level: these portions should maintain a healthy weight"
        activity_note = "Ensure your cat has plenty of opportunity for exercise through play"

    if _breed_matches(breed_lc, ["persian", "himalayan"]):
        breed_note = "Flat-faced breeds may need special dishes for easier eating"
    elif "maine" in breed_lc:
        breed_note = "Larger cats need more calories during growth phases but be careful of overfeeding in adulthood"
    else:
        breed_note = "Monitor weight monthly and adjust portions as needed"

    if profile.age_years > 10:
        age_supplement = "Joint supplements with glucosamine for senior cats"
    else:
        age_supplement = "Multivitamin formulated specifically for cats"

    profile_block = _profile_block(profile, f"- **Daily Caloric Need:** Approximately {calories} calories")

    return f"""# {_pet_emoji(profile)} Personalized Diet Plan for {breed} Cat

{profile_block}

## 📅 Daily Feeding Schedule

### 🌅 Morning (6:00-7:30 AM)
- First meal: {meal_oz} oz of high-quality cat food ({round_half_up(calories * 0.45)} calories)
- Mix of wet and dry food for hydration
- Fresh water refill

### 🕛 Midday (11:00 AM-1:00 PM)
- Refresh water bowl
- Short play session to stimulate hunting instincts

### 🌇 Afternoon (3:30-5:00 PM)
- Interactive puzzle feeder with a few kibbles from the daily allowance
- Playtime to stimulate hunting instincts

### 🌙 Evening (7:00-8:00 PM)
- Main meal: {meal_oz} oz of premium wet food ({round_half_up(calories * 0.45)} calories)
- Add fish oil supplement
- Fresh water refill

## ⚖️ Daily Portions
- Per meal: {meal_oz} oz
- Total daily food: {daily_oz} oz
- {portion_note}

## 🥩 Recommended Foods

### Premium Cat Food Options
- Wet food: Royal Canin, Wellness, Hill's Science Diet ({profile.age_category}-specific formula)
- Dry food: Purina Pro Plan, Blue Buffalo, Iams

### Nutritional Balance
- High-quality protein sources (chicken, turkey, fish)
- Limited carbohydrate content
- Adequate taurine levels (essential for cats)
- Proper fat content for energy

## 💧 Hydration
- Cats often have low thirst drive - consider pet water fountain
- Place multiple water sources throughout home
- Wet food helps provide additional moisture
- Check water level and freshness twice daily

## 💊 Supplements
- Omega-3 fatty acids for coat health (fish oil: {weight * 10}mg daily)
- {age_supplement}
- Digestive enzymes and probiotics for sensitive stomachs

## 📝 Special Notes
- {breed_note}
- {activity_note}{_nutrition_notes(profile)}"""


def _other_nutrition(profile: PetProfile) -> str:
    species = profile.species_label
    return f"""# {_pet_emoji(profile)} Personalized Diet Plan for {profile.breed_label} {species}

{_other_profile_block(profile)}

## 📅 Daily Care Schedule

### 🌅 Morning (7:00-9:00 AM)
- First feeding with fresh food appropriate for your {species}
- Clean habitat/enclosure
- Fresh water provision

### 🕛 Midday (12:00-2:00 PM)
- Check water levels
- Enrichment activity or supervised time outside enclosure (if applicable)

### 🌇 Afternoon (3:00-5:00 PM)
- Small supplemental feeding if appropriate for species
- Habitat maintenance as needed

### 🌙 Evening (6:00-8:00 PM)
- Main feeding for the day
- Final habitat check
- Social interaction time if appropriate for species

## 🥩 Nutrition Recommendations
- Research specific nutritional needs for your {species} species
- Consult with a veterinarian specialized in exotic or small pets
- Provide a balanced diet appropriate for your pet's specific needs

## 💧 Hydration
- Ensure appropriate water delivery system for your species
- Clean and refill water containers daily
- Monitor hydration through behavior and waste output

## 🏠 Habitat Considerations
- Maintain appropriate temperature and humidity
- Provide adequate space for movement and exercise
- Include appropriate enrichment items

## 📝 Special Notes
- {species}s have unique care requirements that may differ significantly from common pets
- Regular visits to a specialized veterinarian are recommended
- Consult species-specific care guides for detailed information{_nutrition_notes(profile)}"""


# ============================================================================
# Training
# ============================================================================

HIGHLY_TRAINABLE_DOGS = ["border collie", "poodle", "german shepherd", "labrador", "golden retriever", "doberman"]
LOW_TRAINABLE_DOGS = ["afghan hound", "bulldog", "chow chow", "basenji", "beagle", "shiba inu"]

DOG_TRAINING_TIPS = [
    (("retriever", "labrador"), [
        "Highly food and play motivated - use both as rewards",
        "Natural retrieving instincts - incorporate fetch into training",
        "Eager to please - praise is very effective",
        "May be easily distracted by scents - work on focus",
    ]),
    (("shepherd",), [
        "Highly intelligent - needs mental challenges",
        "May be protective - focus on socialization",
        "Responds well to consistent routine",
        "Excels with clear hierarchy and expectations",
    ]),
    (("terrier",), [
        "Independent thinkers - keep sessions engaging",
        "High prey drive - manage distractions carefully",
        "Responds well to positive reinforcement",
        "May need extra patience with recall training",
    ]),
    (("hound",), [
        "Scent-driven - expect distraction by smells",
        "Independent nature - be extra consistent",
        "Use high-value treats for motivation",
        "May need secure area for off-leash work",
    ]),
]
DEFAULT_DOG_TRAINING_TIPS = [
    "Research specific training techniques for your breed",
    "Consider consulting with a breed-specific trainer",
    "Adapt training to your dog's individual personality",
    "Be consistent with commands and expectations",
]


def _bullets(lines) -> str:
    return "\n".join(f"- {line}" for line in lines)


def _pick_by_breed(breed_lc: str, table, default):
    for names, value in table:
        if _breed_matches(breed_lc, names):
            return value
    return default


def _dog_training(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()

    if _breed_matches(breed_lc, HIGHLY_TRAINABLE_DOGS):
        trainability = "high"
    elif _breed_matches(breed_lc, LOW_TRAINABLE_DOGS):
        trainability = "requires patience"
    else:
        trainability = "moderate"

    tips = _pick_by_breed(breed_lc, DOG_TRAINING_TIPS, DEFAULT_DOG_TRAINING_TIPS)

    if profile.age_category == "puppy":
        age_note = "Keep training sessions very short (2-5 minutes) but frequent throughout the day"
    elif profile.age_category == "senior dog":
        age_note = "Adjust for shorter attention span and potential physical limitations"
    else:
        age_note = "Adult dogs can focus longer but still benefit from varied training"

    activity_note = {
        "high": "Incorporate training into exercise to help manage high energy",
        "low": "Keep training physically easy but mentally stimulating",
        "moderate": "Balance mental and physical challenges in training sessions",
    }[profile.activity_tier]

    profile_block = _profile_block(profile, f"- **Trainability:** {_capitalize(trainability)}")

    return f"""# {_pet_emoji(profile)} Personalized Training Plan for {breed} Dog

{profile_block}

## 📅 Daily Training Schedule

### 🌅 Morning (6:00-8:00 AM)
- 5-minute reinforcement of basic commands before breakfast
- Short leash walking practice with focus on heel command
- Mental stimulation puzzle during breakfast

### 🕛 Midday (11:30 AM-1:00 PM)
- 10-minute training session focusing on one new skill
- Practice "stay" command with increasing duration
- Brief play session as reward

### 🌇 Afternoon (3:30-5:00 PM)
- 15-minute active training combining previously learned skills
- Socialization practice if appropriate (with people or other dogs)
- Obedience reinforcement during play

### 🌙 Evening (6:30-7:30 PM)
- 5-minute calm behavior training (settle, place command)
- Reinforcement of day's lessons
- Quiet bonding time with gentle praise

## 🎯 Weekly Training Goals

### Week 1: Foundation
- Master sit, stay, come commands
- Begin leash walking without pulling
- Establish name recognition and focus

### Week 2: Building Skills
- Extend stay duration to 30 seconds
- Introduce down command
- Begin off-leash recall in secure area

### Week 3: Advanced Work
- Introduce heel command
- Begin distraction training
- Add hand signals to verbal commands

### Week 4: Refinement
- Combine commands in sequence
- Practice with moderate distractions
- Introduce duration and distance challenges

## 🧠 Breed-Specific Training Tips
{_bullets(tips)}

## 🏆 Recommended Training Methods
- Positive reinforcement with treats and praise
- Clicker training for precise timing
- Short, frequent sessions (5-15 minutes)
- Consistency in commands and expectations

## 🧰 Training Tools
- High-value treats (small, soft, and fragrant)
- 6-foot leash for basic training
- Long-line (15-30 feet) for distance work
- Treat pouch for easy access
- Clicker (optional)
- Interactive toys for mental stimulation

## 📝 Training Considerations
- {age_note}
- {activity_note}{_training_notes(profile)}"""


def _cat_training(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()

    if profile.age_category == "kitten":
        age_note = "Kittens have very short attention spans - keep sessions under 1 minute"
    elif profile.age_years > 10:
        age_note = "Senior cats may learn more slowly - be extra patient and keep sessions shorter"
    else:
        age_note = "Adult cats can learn new behaviors but need consistent practice"

    if _breed_matches(breed_lc, ["siamese", "abyssinian"]):
        breed_note = "Your breed is typically intelligent and active - can learn more complex behaviors"
    elif _breed_matches(breed_lc, ["persian", "himalayan"]):
        breed_note = "Your breed may be more laid-back - focus on calm, simple behaviors"
    else:
        breed_note = "Each cat has individual preferences - adapt training to what motivates your cat"

    activity_note = {
        "high": "Channel energy with play before training for better focus",
        "low": "Keep physical demands minimal but maintain mental stimulation",
        "moderate": "Balance play and training based on daily energy levels",
    }[profile.activity_tier]

    return f"""# {_pet_emoji(profile)} Personalized Training Plan for {breed} Cat

{_profile_block(profile)}

## 📅 Daily Training Schedule

### 🌅 Morning (7:00-8:00 AM)
- 2-3 minute clicker training before breakfast
- Target training with wand toy
- Food puzzle for breakfast to stimulate problem-solving

### 🕛 Midday (12:00-1:00 PM)
- 2-minute training session with favorite toy as reward
- Practice "come when called" with special treats
- Short play session as reinforcement

### 🌇 Afternoon (4:00-5:00 PM)
- 3-minute training for a new behavior
- Practice previously learned cues
- Interactive toy time as reward

### 🌙 Evening (7:00-8:00 PM)
- Final 1-2 minute training session
- Calm behavior reinforcement
- Treat-dispensing toy for mental stimulation

## 🎯 Weekly Training Goals

### Week 1: Basics
- Introduce clicker or marker word
- Begin target training with finger or target stick
- Start "come when called" to their name

### Week 2: Simple Behaviors
- Sit cue using lure method
- High-five or paw touch
- Encourage use of scratching post

### Week 3: Practical Skills
- Enter carrier on cue
- Allow brief handling of paws
- "Stay" for 5 seconds

### Week 4: Advanced Work
- Introduce harness acceptance if needed
- Begin leash familiarization
- Extend stay duration to 10-15 seconds

## 🧠 Cat Training Tips
- Keep sessions very short (1-3 minutes maximum)
- Train before meals when motivation is highest
- Use tiny, high-value treats (freeze-dried meat works well)
- End on success, however small
- Never force or punish - cats respond poorly to pressure

## 🧰 Training Tools
- Clicker or consistent marker word
- Target stick (or use your finger)
- Variety of tiny, high-value treats
- Interactive toys
- Treat-dispensing puzzles
- Cat wand toys

## 📝 Training Considerations
- {age_note}
- {breed_note}
- {activity_note}{_training_notes(profile)}"""


def _other_training(profile: PetProfile) -> str:
    species = profile.species_label
    return f"""# {_pet_emoji(profile)} Personalized Training Plan for {profile.breed_label} {species}

{_other_profile_block(profile, include_weight=False)}

## Training Approach
For {species}s, conventional training methods may need significant adaptation. This plan focuses on:
- Establishing comfort and trust
- Encouraging natural behaviors
- Managing environment for success
- Species-appropriate interaction

## 📅 Daily Interaction Schedule

### 🌅 Morning (7:00-9:00 AM)
- Calm approach and feeding routine
- Observe behavior for health and comfort
- Brief handling if appropriate for species

### 🕛 Midday (12:00-2:00 PM)
- Environmental enrichment addition
- Positive reinforcement for approach behaviors
- Brief target training if appropriate

### 🌇 Afternoon (4:00-6:00 PM)
- Specialized interaction based on species needs
- Habitat maintenance with positive associations
- Quiet observation time to understand behavior patterns

### 🌙 Evening (7:00-9:00 PM)
- Calm interaction and final feeding
- Minimal handling to reduce stress
- Set up nighttime environment appropriately

## 🧰 Species-Appropriate Tools
- Research species-specific enrichment items
- Appropriate handling equipment if needed
- Safe space for retreat when stressed
- Species-appropriate rewards

## 📝 Training Considerations
- {species}s have unique care requirements that differ from dogs and cats
- Consult with a veterinarian specialized in exotic pets
- Research species-specific behavior and communication
- Focus on positive reinforcement and natural behavior encouragement{_training_notes(profile)}"""


# ============================================================================
# Health
# ============================================================================

DOG_HEALTH_CONCERNS = [
    (("retriever", "labrador"), "hip/elbow dysplasia, obesity, ear infections"),
    (("bulldog", "pug", "boxer"), "breathing issues, overheating, skin fold infections"),
    (("shepherd", "doberman"), "hip/elbow dysplasia, cardiac issues, von Willebrand's disease"),
    (("dachshund", "corgi"), "intervertebral disc disease, obesity, back problems"),
    (("poodle", "bichon"), "dental disease, ear infections, skin allergies"),
]

CAT_HEALTH_CONCERNS = [
    (("persian", "himalayan"), "breathing issues, eye discharge, dental disease, polycystic kidney disease"),
    (("maine", "ragdoll"), "hypertrophic cardiomyopathy, joint issues due to size"),
    (("siamese", "oriental"), "dental disease, respiratory issues, amyloidosis"),
    (("sphynx",), "skin issues, hypertrophic cardiomyopathy, dental disease"),
]


def _breed_monitoring(concerns: str) -> str:
    if not concerns:
        return "- Research and monitor for common health issues in your breed"
    return (
        f"- Regular checks for signs of {concerns}\n"
        "- Discuss breed-specific preventative care with your veterinarian\n"
        "- Consider genetic testing for common breed disorders"
    )


def _quarterly_extra(line: str) -> str:
    return f"\n- {line}" if line else ""


def _dog_health(profile: PetProfile) -> str:
    breed = profile.breed_label
    concerns = _pick_by_breed(breed.lower(), DOG_HEALTH_CONCERNS, "")

    if profile.age_category == "puppy":
        age_note = "Puppies need frequent veterinary visits for initial vaccines and development checks"
    elif profile.age_category == "senior dog":
        age_note = "Senior dogs benefit from twice-yearly veterinary checkups and bloodwork"
    else:
        age_note = "Adult dogs should have annual wellness exams"

    activity_note = {
        "high": "Active dogs need careful monitoring for joint health and injuries",
        "low": "Low-activity dogs need careful weight management and gentle exercise",
        "moderate": "Maintain moderate, regular exercise appropriate for age and breed",
    }[profile.activity_tier]

    if profile.weight_units > 50:
        weight_note = "Larger dogs often face joint issues - support with appropriate supplements"
    else:
        weight_note = "Smaller dogs often face dental issues - prioritize dental care"

    senior_bloodwork = "Senior wellness blood work (recommended)" if profile.age_years > 7 else ""

    concern_text = concerns or "Research specific concerns for your breed"
    profile_block = _profile_block(profile, f"- **Common breed health concerns:** {concern_text}")

    return f"""# {_pet_emoji(profile)} Personalized Healthcare Plan for {breed} Dog

{profile_block}

## 📅 Daily Health Routine

### 🌅 Morning (6:00-8:00 AM)
- Quick visual health check during morning bathroom break
- Check water freshness and food intake
- Administer any morning medications with food
- Brief dental check while giving dental treat

### 🕛 Midday (11:30 AM-1:00 PM)
- Brief exercise appropriate for age and health status
- Fresh water check and refill
- Monitor bathroom habits for any changes
- Quick check of eyes, nose, and energy level

### 🌇 Afternoon (4:00-5:00 PM)
- Main exercise session tailored to health needs
- Body check during petting (feel for lumps, sensitive areas)
- Brief grooming session to check skin and coat
- Mental enrichment activity for cognitive health

### 🌙 Evening (6:30-8:00 PM)
- Ear and paw check after final outdoor time
- Dental care (brushing teeth or dental chew)
- Administer any evening medications
- Calm environment for good sleep quality

## 💉 Preventative Care Schedule

### Monthly
- Flea, tick, and heartworm preventatives
- Weight check at home
- Nail trimming as needed
- Full at-home body check

### Quarterly
- Seasonal parasite control adjustment
- Deep coat check for seasonal shedding issues
- Dental health assessment{_quarterly_extra(senior_bloodwork)}

### Annually
- Complete veterinary wellness exam
- Vaccinations as recommended by veterinarian
- Dental cleaning assessment
- Heartworm and parasite testing

## 🔍 Health Monitoring

### Watch For
- Changes in appetite, thirst, or bathroom habits
- Difficulty rising or reluctance to exercise
- Coughing, sneezing, or labored breathing
- Skin issues, lumps, or coat changes
- Behavioral changes that might indicate pain or discomfort

### Breed-Specific Monitoring
{_breed_monitoring(concerns)}

## 📝 Special Health Considerations
- {age_note}
- {activity_note}
- {weight_note}{_health_notes(profile)}"""


def _cat_health(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()
    concerns = _pick_by_breed(breed_lc, CAT_HEALTH_CONCERNS, "")

    if profile.age_category == "kitten":
        age_note = "Kittens need frequent veterinary visits for vaccines and deworming"
    elif profile.age_years > 10:
        age_note = "Senior cats benefit from twice-yearly checkups and bloodwork"
    else:
        age_note = "Adult cats should have annual wellness exams"

    activity_note = {
        "low": "Indoor-only cats need environmental enrichment and weight management",
        "high": "Very active cats need safe outlets for energy and closer monitoring for injuries",
        "moderate": "Provide regular play and exercise opportunities",
    }[profile.activity_tier]

    if _breed_matches(breed_lc, ["flat", "persian", "exotic"]):
        coat_note = "Brachycephalic (flat-faced) cats need special attention to breathing and eye health"
    elif _breed_matches(breed_lc, ["hairless", "sphynx"]):
        coat_note = "Hairless breeds need skin care and temperature management"
    else:
        coat_note = "Regular grooming helps monitor skin health and reduce hairballs"

    senior_check = "Check for signs of arthritis or mobility changes" if profile.age_years > 10 else ""

    concern_text = concerns or "Research specific concerns for your breed"
    profile_block = _profile_block(profile, f"- **Common breed health concerns:** {concern_text}")

    return f"""# {_pet_emoji(profile)} Personalized Healthcare Plan for {breed} Cat

{profile_block}

## 📅 Daily Health Routine

### 🌅 Morning (7:00-8:30 AM)
- Observe eating, drinking, and litter box use
- Check eyes for clarity and absence of discharge
- Administer any morning medications (hide in treat or food)
- Brief play session to assess mobility and energy

### 🕛 Midday (12:00-2:00 PM)
- Fresh water check and refill
- Brief interaction to gauge energy and behavior
- Litter box cleaning and monitoring
- Provide clean resting areas

### 🌇 Afternoon (3:30-5:30 PM)
- Interactive play for exercise and weight management
- Brief grooming session to check skin and coat
- Mental enrichment with puzzle feeder or new toy
- Quick check of ears, eyes, nose for any issues

### 🌙 Evening (7:00-9:00 PM)
- Final meal and medication administration if needed
- Gentle body check during petting time
- Dental care with appropriate treats or brushing
- Create calm environment for quality sleep time

## 💉 Preventative Care Schedule

### Monthly
- Flea preventative application
- Weight check at home
- Nail trimming as needed
- Thorough grooming session

### Quarterly
- Complete at-home health scan
- Dental health assessment
- Parasite prevention review{_quarterly_extra(senior_check)}

### Annually
- Complete veterinary wellness exam
- Vaccinations as recommended
- Blood work and urinalysis
- Dental health professional assessment

## 🔍 Health Monitoring

### Watch For
- Changes in litter box habits or appearance of waste
- Increased thirst or changes in appetite
- Hiding behavior or personality changes
- Grooming changes (either excessive or neglected)
- Vomiting, especially if frequent

### Breed-Specific Monitoring
{_breed_monitoring(concerns)}

## 📝 Special Health Considerations
- {age_note}
- {activity_note}
- {coat_note}{_health_notes(profile)}"""


def _other_health(profile: PetProfile) -> str:
    species = profile.species_label
    return f"""# {_pet_emoji(profile)} Personalized Healthcare Plan for {profile.breed_label} {species}

{_other_profile_block(profile)}

## 📅 Daily Health Routine

### 🌅 Morning (7:00-9:00 AM)
- Observe eating and drinking behavior
- Check habitat conditions (temperature, humidity)
- Visual health assessment
- Administer any medications if needed

### 🕛 Midday (12:00-2:00 PM)
- Fresh water check and refill
- Quick habitat cleaning as needed
- Brief observation period to check activity levels
- Environmental enrichment addition

### 🌇 Afternoon (3:00-5:00 PM)
- Main habitat cleaning if needed
- Food and supplement provision
- Check for normal waste elimination
- Brief handling if appropriate for species

### 🌙 Evening (7:00-9:00 PM)
- Final visual health check
- Adjust habitat for nighttime conditions
- Provide fresh water
- Ensure security and comfort of enclosure

## 💉 Preventative Care Schedule

### Weekly
- Thorough habitat cleaning
- Weight monitoring if possible
- Complete visual health assessment
- Check for any abnormal signs or behaviors

### Monthly
- Deep habitat cleaning
- Equipment maintenance check
- Assessment of growth/development
- Adjust diet and care as needed for life stage

### Annually
- Exotic veterinarian checkup
- Species-appropriate testing
- Habitat upgrade assessment
- Review of dietary needs

## 🔍 Health Monitoring

### Watch For
- Changes in eating or drinking
- Abnormal waste (consistency, frequency)
- Unusual behavior or lethargy
- Respiratory changes
- Skin/scale/feather condition changes

## 📝 Special Health Considerations
- {species}s require specialized veterinary care from an exotic animal specialist
- Research species-specific health needs thoroughly
- Maintain optimal habitat conditions to prevent stress and illness
- Many health issues relate to improper habitat or diet - prevention is critical{_health_notes(profile)}"""


# ============================================================================
# Activities
# ============================================================================

HIGH_ENERGY_DOGS = ["border collie", "australian shepherd", "husky", "vizsla", "jack russell", "dalmatian"]
LOW_ENERGY_DOGS = ["bulldog", "basset hound", "great dane", "mastiff", "shih tzu", "pug"]

ACTIVITY_BASE_MINUTES = {"high": 60, "moderate": 45, "low": 30}
ACTIVITY_LEVEL_ADJUSTER = {"high": 1.2, "moderate": 1.0, "low": 0.8}

DOG_MAIN_SESSION = {
    "high": ["Fetch, frisbee, or agility practice", "Jogging or hiking on varied terrain", "Swimming if available"],
    "low": ["Gentle walking with plenty of sniff breaks", "Easy play session with favorite toys",
            "Short socialization time if desired"],
    "moderate": ["Moderate walking with play breaks", "Interactive games like tug or fetch",
                 "Training games for mental stimulation"],
}

DOG_BREED_ACTIVITIES = [
    (("retriever", "labrador"), [
        "Retrieving games and water activities",
        "Scent-based challenges",
        "Agility exercises",
        "Social activities with people and dogs",
    ]),
    (("herding", "collie", "shepherd"), [
        "Herding ball toys",
        "Advanced obedience training",
        "Agility or flyball sports",
        "Mental challenges that simulate work",
    ]),
    (("terrier",), [
        "Digging pit or sandbox play",
        "Tug games with clear rules",
        "Earth dog activities or simulations",
        "Chasing games with appropriate toys",
    ]),
    (("hound",), [
        "Scent trails and nose work",
        "Long exploratory walks",
        "Sound-based recall games",
        "Tracking activities",
    ]),
]
DEFAULT_DOG_ACTIVITIES = [
    "Research activities that match your dog's breed history",
    "Consider what tasks your breed was originally developed for",
    "Adapt historical work into play activities",
    "Consult breed-specific resources for ideas",
]


def dog_daily_activity_minutes(profile: PetProfile, energy_needs: str) -> int:
    """Recommended daily activity minutes: breed energy base, scaled by age and activity level."""
    age = profile.age_years
    if age < 2:
        age_adjuster = 0.8
    elif age > 8:
        age_adjuster = 0.6
    else:
        age_adjuster = 1
    return round_half_up(
        ACTIVITY_BASE_MINUTES[energy_needs] * age_adjuster * ACTIVITY_LEVEL_ADJUSTER[profile.activity_tier]
    )


def _sub_bullets(lines) -> str:
    return "\n".join(f"  • {line}" for line in lines)


def _optional_bullet(line: str) -> str:
    return f"\n- {line}" if line else ""


def _dog_activities(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()
    age = profile.age_years
    weight = profile.weight_units

    if _breed_matches(breed_lc, HIGH_ENERGY_DOGS):
        energy_needs = "high"
    elif _breed_matches(breed_lc, LOW_ENERGY_DOGS):
        energy_needs = "low"
    else:
        energy_needs = "moderate"

    daily_minutes = dog_daily_activity_minutes(profile, energy_needs)

    if age < 2:
        age_variety = "Short bursts of play with plenty of rest breaks"
    elif age > 8:
        age_variety = "Gentle walking on soft surfaces"
    else:
        age_variety = "Age-appropriate physical challenges"

    if profile.activity_tier == "high":
        social_outing = "Supervised dog park visits (if well-socialized)"
    else:
        social_outing = "Calm meet-ups with known dog friends"

    if profile.age_category == "puppy":
        age_note = "Puppies need multiple short activity sessions with plenty of rest; avoid high-impact exercise"
    elif profile.age_category == "senior dog":
        age_note = "Senior dogs benefit from consistent, gentle exercise; monitor for signs of pain or fatigue"
    else:
        age_note = "Adult dogs need balanced physical and mental exercise tailored to their health status"

    if weight > 50:
        weight_note = "Larger dogs should avoid jumping from heights and exercise on softer surfaces when possible"
    else:
        weight_note = "Smaller dogs often need less duration but similar frequency of exercise"

    activity_note = {
        "low": "Start with very short sessions and gradually increase duration as fitness improves",
        "high": "Ensure adequate physical and mental exercise to prevent boredom behaviors",
        "moderate": "Balance activity with appropriate rest periods",
    }[profile.activity_tier]

    puppy_class = "Puppy socialization classes" if profile.age_category == "puppy" else ""
    breed_activities = _pick_by_breed(breed_lc, DOG_BREED_ACTIVITIES, DEFAULT_DOG_ACTIVITIES)

    profile_block = _profile_block(
        profile,
        f"- **Energy needs:** {_capitalize(energy_needs)}",
        f"- **Recommended daily activity:** {daily_minutes} minutes",
    )
    free_play = "Off-leash play in secure areas" if energy_needs == "high" else "Gentle play sessions"
    size_play = "Swimming (gentle on joints)" if weight > 50 else "Agility exercises appropriate for size"

    return f"""# {_pet_emoji(profile)} Personalized Activity Plan for {breed} Dog

{profile_block}

## 📅 Daily Activity Schedule

### 🌅 Morning (6:00-8:00 AM)
- {round_half_up(daily_minutes * 0.4)} minute brisk walk or light jog
- 5 minutes of stretching and warm-up play
- Brief training session incorporated into exercise
- Sniff breaks for mental stimulation

### 🕛 Midday (11:30 AM-1:00 PM)
- 10-minute potty break with short play session
- Mental stimulation puzzle or Kong toy
- Brief training reinforcement or tricks practice
- Quiet time for rest and digestion

### 🌇 Afternoon (3:30-5:30 PM)
- {round_half_up(daily_minutes * 0.5)} minute main exercise session:
{_sub_bullets(DOG_MAIN_SESSION[energy_needs])}
- Cooling down period with gentle walking
- Water break and rest time

### 🌙 Evening (7:00-8:30 PM)
- Short, 10-minute potty walk
- Calm indoor play or training games
- Gentle massage and bonding time
- Relaxation cues to wind down for the night

## 🏆 Weekly Activity Variety

### Physical Exercise
- Leashed walks in different environments
- {free_play}
- {size_play}
- {age_variety}

### Mental Stimulation
- Puzzle toys and treat-dispensing games
- Training sessions for new skills
- Scent games and nose work activities
- New walking routes for novel experiences

### Social Activities
- {social_outing}
- Pet-friendly outings in new environments
- Controlled greetings with new people{_optional_bullet(puppy_class)}

## 🧠 Breed-Specific Activities
{_bullets(breed_activities)}

## 📝 Activity Considerations
- {age_note}
- {weight_note}
- {activity_note}{_activity_notes(profile)}"""


CAT_BREED_ACTIVITY_TIPS = [
    (("bengal", "abyssinian", "siamese"),
     "Your breed is typically very active and intelligent - provide plenty of climbing, "
     "interactive play, and puzzle feeders"),
    (("persian", "ragdoll", "himalayan"),
     "Your breed typically has a more laid-back nature - focus on gentle play sessions and "
     "comfortable resting spots"),
    (("maine", "norwegian"),
     "Your breed is typically playful despite their large size - provide sturdy climbing trees and larger toys"),
]
DEFAULT_CAT_ACTIVITIES = [
    "Research activities that appeal to your specific breed",
    "Observe your cat's preferences and build on those",
    "Provide variety in play and enrichment",
    "Respect your cat's individual personality",
]

CAT_PLAY_SESSIONS = {"low": "3-4", "high": "6-8", "moderate": "4-5"}


def _cat_activities(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()
    age = profile.age_years

    breed_tip = _pick_by_breed(breed_lc, CAT_BREED_ACTIVITY_TIPS, "")
    breed_section = f"- {breed_tip}" if breed_tip else _bullets(DEFAULT_CAT_ACTIVITIES)

    if profile.age_category == "kitten":
        age_note = "Kittens have bursts of high energy followed by deep sleep - accommodate this natural pattern"
    elif age > 10:
        age_note = "Senior cats benefit from gentle play and comfortable resting spots at different heights"
    else:
        age_note = "Adult cats need regular play to maintain healthy weight and mental wellbeing"

    activity_note = {
        "low": "Encourage gentle activity with enticing toys and positive reinforcement",
        "high": "Ensure adequate play to prevent destructive behaviors from boredom",
        "moderate": "Balance play with appropriate rest periods",
    }[profile.activity_tier]

    if profile.weight_units > 15:
        weight_note = "Monitor for joint issues - provide ramps to favorite perches and gentle play"
    else:
        weight_note = "Ensure play areas have secure footing to prevent injury during active play"

    playmate = ""
    if age < 2 and profile.activity_tier != "low":
        playmate = "Consider compatible feline playmate if single cat"

    sessions = CAT_PLAY_SESSIONS[profile.activity_tier]
    profile_block = _profile_block(profile, f"- **Recommended play sessions:** {sessions} short sessions daily")
    wheel_or_chase = "Cat wheel if appropriate and available" if profile.activity_tier == "high" else "Gentle chase games"

    return f"""# {_pet_emoji(profile)} Personalized Activity Plan for {breed} Cat

{profile_block}

## 📅 Daily Activity Schedule

### 🌅 Morning (6:00-8:00 AM)
- 5-minute interactive wand toy play
- Puzzle feeder for breakfast for mental stimulation
- Window perch time to watch morning activity outside
- Rotate toys to maintain interest

### 🕛 Midday (11:00 AM-1:00 PM)
- 3-5 minute play session with catnip toy
- Hide treats around the home for hunting stimulation
- Provide fresh cardboard scratcher or scratching post
- Quiet observation time

### 🌇 Afternoon (3:00-5:00 PM)
- 5-10 minute main play session with variety of toys
- Climbing activity on cat tree or shelves
- Rotate in a new toy or rearrange play area
- Social interaction time with gentle petting

### 🌙 Evening (7:00-9:00 PM)
- 5-10 minute play to expend evening energy
- Puzzle toy with treats before dinner
- Gentle brushing session for bonding
- Set up overnight enrichment (window access, quiet toys)

## 🏆 Weekly Activity Variety

### Physical Play
- Wand toys mimicking prey movement
- Ping pong balls or crinkle balls for batting
- Laser pointer play (always end with catchable toy)
- {wheel_or_chase}

### Mental Stimulation
- Puzzle feeders of increasing difficulty
- Treat-hiding games throughout the home
- New cardboard boxes or paper bags to explore
- Rotating toy collection to maintain novelty

### Environmental Enrichment
- Vertical space with cat trees, shelves, or perches
- Window perches with bird feeders outside
- Safe outdoor experience (catio, harness, or enclosed stroller)
- Different textures and surfaces for exploration

### Social Activities
- Gentle interactive play with humans{_optional_bullet(playmate)}
- Brief, positive experiences with visitors
- Clicker training for mental stimulation

## 🧠 Breed-Specific Activities
{breed_section}

## 📝 Activity Considerations
- {age_note}
- {activity_note}
- {weight_note}{_activity_notes(profile)}"""


def _other_activities(profile: PetProfile) -> str:
    species = profile.species_label
    return f"""# {_pet_emoji(profile)} Personalized Activity Plan for {profile.breed_label} {species}

{_other_profile_block(profile)}

## Important Note
This is a generalized activity plan. {species}s have highly specialized activity needs that vary significantly by species. Consult with a veterinarian who specializes in exotic pets for species-appropriate recommendations.

## 📅 Daily Activity Schedule

### 🌅 Morning (7:00-9:00 AM)
- Observe natural activity patterns
- Provide fresh enrichment appropriate to species
- Maintain appropriate lighting cycle
- First feeding with foraging opportunity if appropriate

### 🕛 Midday (11:00 AM-1:00 PM)
- Brief interaction if species-appropriate
- Refresh habitat enrichment
- Observe behavior for health assessment
- Provide varied terrain or substrate if appropriate

### 🌇 Afternoon (3:00-5:00 PM)
- Main activity period - provide appropriate enrichment
- Species-appropriate exercise opportunity
- Novel stimuli introduction (sights, sounds, smells)
- Second feeding with different presentation method

### 🌙 Evening (7:00-9:00 PM)
- Begin transition to night cycle if appropriate
- Calm, appropriate enrichment for nighttime
- Final habitat check for safety and comfort
- Social species may need evening interaction

## 🏆 Environmental Enrichment

### Habitat Design
- Multiple hiding and resting areas
- Varied terrain appropriate for natural behaviors
- Climbing, burrowing, or swimming areas as needed
- Temperature gradient if appropriate for species

### Sensory Stimulation
- Visual barriers and viewing opportunities
- Species-appropriate sounds or quiet
- Natural substrate that encourages foraging
- Safe plants or natural materials when possible

### Novel Experiences
- Rotate enrichment items weekly
- Change habitat arrangement periodically
- Introduce new safe objects for exploration
- Vary feeding methods and locations

## 📝 Activity Considerations
- Research species-specific activity needs thoroughly
- Many exotic pets do not benefit from handling - respect natural behaviors
- Activity needs vary dramatically by species and individual
- Inappropriate enrichment can cause stress rather than benefit{_activity_notes(profile)}"""


# ============================================================================
# Grooming
# ============================================================================

DOG_COATS = [
    (("poodle", "bichon", "doodle"), ("Curly, non-shedding", "Every 4-6 weeks professional, daily home brushing")),
    (("retriever", "shepherd", "husky"),
     ("Double-coat, heavy shedding", "Weekly thorough brushing, daily during shedding seasons")),
    (("yorkshire", "maltese", "shih tzu"), ("Long, silky, continuous growth", "Every 4-6 weeks professional, daily brushing")),
    (("bulldog", "beagle", "boxer"), ("Short, smooth", "Weekly brushing, bath as needed every 4-6 weeks")),
]
DEFAULT_DOG_COAT = ("Standard", "Brushing 2-3 times weekly, bath every 4-8 weeks")
WIRY_DOG_COAT = ("Wiry, low shedding", "Hand-stripping or clipping every 6-8 weeks, weekly brushing")

# Keyed by the first word of the coat type
DOG_COAT_BRUSHING = {
    "Curly": ["Use slicker brush followed by metal comb", "Check for matting behind ears and in armpits",
              "Detangle any small knots before they worsen"],
    "Double-coat": ["Undercoat rake to remove loose hair", "Slicker brush to smooth topcoat",
                    "Extra attention during seasonal shedding"],
    "Wiry": ["Use slicker brush against and with hair growth", "Comb through beard and leg furnishings",
             "Check for skin issues under dense coat"],
    "Long": ["Section brushing with pin brush or slicker", "Detangling spray for silky coats",
             "Special attention to ear fringe and chest"],
    "Short": ["Rubber curry brush or grooming mitt", "Wipe down with microfiber cloth",
              "Check skin folds if applicable"],
    "Standard": ["Use appropriate brush for your dog's coat type", "Brush in direction of hair growth",
                 "Check for any skin issues"],
}

DOG_COAT_TOOLS = {
    "Curly": ["Slicker brush", "Metal greyhound comb", "Detangling spray", "Professional-quality clippers",
              "Blunt-tip scissors for face"],
    "Double-coat": ["Undercoat rake or de-shedding tool", "Slicker brush", "Pin brush",
                    "High-velocity dryer (optional)", "Shedding blade"],
    "Wiry": ["Slicker brush", "Stripping knife (if hand-stripping)", "Metal comb", "Thinning shears",
             "Terrier pad for face"],
    "Long": ["Pin brush", "Slicker brush", "Metal comb", "Detangling spray", "Blunt-tip scissors for trimming"],
    "Short": ["Rubber curry brush", "Grooming mitt", "Soft bristle brush", "Microfiber cloth",
              "Shedding blade (optional)"],
    "Standard": ["All-purpose dog brush", "Nail clippers", "Dog-specific toothbrush and toothpaste",
                 "Dog-specific shampoo", "Ear cleaning solution"],
}


def _coat_key(coat_type: str) -> str:
    return coat_type.split(",")[0]


def _dog_coat(breed_lc: str):
    if "terrier" in breed_lc and "yorkshire" not in breed_lc:
        return WIRY_DOG_COAT
    return _pick_by_breed(breed_lc, DOG_COATS, DEFAULT_DOG_COAT)


def _dog_grooming(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()
    coat_type, grooming_frequency = _dog_coat(breed_lc)
    coat_key = _coat_key(coat_type)

    if coat_key in ("Curly", "Long"):
        bathing = "Every 2-3 weeks"
    elif coat_key == "Double-coat":
        bathing = "Every 4-6 weeks unless dirty"
    else:
        bathing = "Every 3-4 weeks or as needed"

    mat_check = "Check for mats in problem areas" if coat_key in ("Curly", "Long") else ""
    ear_anatomy = ""
    if _breed_matches(breed_lc, ["spaniel", "retriever", "poodle"]):
        ear_anatomy = "Extra attention due to ear anatomy"

    if profile.age_category == "puppy":
        age_note = "Start grooming sessions very short and positive to build lifelong acceptance"
    elif profile.age_category == "senior dog":
        age_note = "Senior dogs may need more frequent, gentler sessions and help with self-grooming"
    else:
        age_note = "Maintain regular grooming to prevent issues and monitor health"

    if _breed_matches(breed_lc, ["bulldog", "pug", "shar pei"]):
        breed_note = "Clean facial folds regularly to prevent infection"
    elif _breed_matches(breed_lc, ["retriever", "newfoundland", "spaniel"]):
        breed_note = "Check ears frequently as breed is prone to ear infections"
    else:
        breed_note = "Pay attention to areas your dog cannot reach easily"

    if profile.activity_tier == "high":
        activity_note = "Active dogs need more frequent paw checks and may require more bathing"
    else:
        activity_note = "Regular grooming helps distribute natural oils and remove loose hair"

    profile_block = _profile_block(
        profile, f"- **Coat Type:** {coat_type}", f"- **Professional Grooming Needs:** {grooming_frequency}"
    )

    return f"""# {_pet_emoji(profile)} Personalized Grooming Plan for {breed} Dog

{profile_block}

## 📅 Daily Grooming Schedule

### 🌅 Morning (6:00-8:00 AM)
- Quick check of eyes for discharge - gently wipe if needed
- Brief tooth brushing or dental treat
- Check paws for debris after morning walk
- Wipe facial folds if applicable to breed

### 🕛 Midday (12:00-2:00 PM)
- Quick brush with appropriate tool if high-shedding breed
- Check and clean ears if needed
- Fresh water in clean bowl
- Monitor for any skin irritation during petting

### 🌇 Afternoon (4:00-6:00 PM)
- Main brushing session (5-15 minutes depending on coat type)
{_sub_bullets(DOG_COAT_BRUSHING[coat_key])}
- Nail check - trim if clicking on floor
- Clean tear stains if applicable

### 🌙 Evening (7:00-9:00 PM)
- Brief tooth brushing or dental care
- Paw pad check and moisturize if needed
- Quick ear check and cleaning if needed
- Gentle massage while checking for any lumps or irritations

## 🛁 Weekly Grooming Tasks

### Bathing
- {bathing}
- Use breed-appropriate dog shampoo
- Thoroughly rinse all product out
- Complete drying to prevent skin issues
- Eye and ear protection during bath

### Deep Coat Care
- Full-body thorough brushing session
- Check between paw pads and trim hair if needed
- Sanitary trim if needed for cleanliness{_optional_bullet(mat_check)}

### Nail and Paw Care
- Trim nails using appropriate tool
- File rough edges after clipping
- Check between paw pads for debris/irritation
- Trim excessive hair between pads if needed

### Ear Care
- Clean with appropriate dog ear cleaner
- Check for redness, odor, or discharge{_optional_bullet(ear_anatomy)}

## 🧰 Recommended Grooming Tools
{_bullets(DOG_COAT_TOOLS[coat_key])}

## 📝 Grooming Considerations
- {age_note}
- {breed_note}
- {activity_note}{_grooming_notes(profile)}"""


CAT_COATS = [
    (("persian", "himalayan"), ("Long, dense, prone to matting", "Daily brushing, professional grooming every 4-6 weeks")),
    (("maine", "norwegian", "ragdoll"),
     ("Semi-long, thick, water-resistant", "2-3 times weekly brushing, occasional professional help")),
    (("siamese", "bengal", "abyssinian"), ("Short, fine, close-lying", "Weekly brushing, rarely needs professional help")),
    (("rex", "devon", "cornish"), ("Curly or wavy, delicate", "Gentle weekly wiping, minimal brushing")),
    (("sphynx",), ("Minimal to no coat, oily skin", "Weekly bathing, daily skin wiping")),
]
DEFAULT_CAT_COAT = ("Standard domestic short/medium", "Weekly brushing, occasional bath if needed")

CAT_COAT_BRUSHING = {
    "Long": ["Metal comb to detect tangles", "Slicker brush to remove loose hair",
             "Special attention to armpits, belly, and ruff"],
    "Semi-long": ["Wide-tooth comb for initial pass", "Slicker brush for undercoat",
                  "Extra attention during seasonal shedding"],
    "Short": ["Soft rubber brush or grooming mitt", "Gentle but thorough strokes",
              "Finish with soft cloth to collect loose hair"],
    "Curly or wavy": ["Very gentle wiping with microfiber cloth", "Minimal brushing to protect delicate coat",
                      "Check for skin issues under curls"],
    "Minimal to no coat": ["Wipe body with special pet wipes", "Check skin folds for buildup",
                           "Apply pet-safe moisturizer if needed"],
    "Standard domestic short/medium": ["Use brush appropriate for your cat's coat type",
                                       "Brush in direction of hair growth", "Keep sessions positive and brief"],
}

CAT_COAT_TOOLS = {
    "Long": ["Metal greyhound comb with wide and narrow teeth", "Slicker brush",
             "Dematting tool (for emergencies only)", "Blunt-tip scissors for sanitary areas",
             "Cat-specific detangling spray"],
    "Semi-long": ["Wide-tooth metal comb", "Slicker brush", "Soft bristle brush", "Grooming glove",
                  "Flea comb for face"],
    "Short": ["Rubber grooming mitt", "Soft bristle brush", "Zoom groom type rubber brush", "Microfiber cloth",
              "Flea comb for face"],
    "Curly or wavy": ["Microfiber cloths", "Very soft baby brush", "Specialized cat wipes", "Flea comb for face only",
                      "Soft grooming glove"],
    "Minimal to no coat": ["Specialized pet wipes", "Soft washcloth", "Pet-safe moisturizer",
                           "Warm water for bathing", "Cat-specific shampoo"],
    "Standard domestic short/medium": ["Flea comb", "Soft bristle brush", "Nail clippers designed for cats",
                                       "Cat-specific toothbrush and toothpaste", "Grooming wipes for spot cleaning"],
}


def _cat_grooming(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()
    coat_type, grooming_frequency = _pick_by_breed(breed_lc, CAT_COATS, DEFAULT_CAT_COAT)
    coat_key = _coat_key(coat_type)

    if coat_key == "Minimal to no coat":
        bathing = "Weekly with specialized shampoo"
        coat_note = "Hairless cats need regular skin care to manage natural oils"
    else:
        bathing = "Only when necessary, 3-4 times yearly at most"
        coat_note = "Regular grooming helps reduce hairballs and shedding"
    if coat_key == "Long":
        coat_note = "Long-haired cats need consistent grooming to prevent painful mats"

    if coat_key in ("Long", "Semi-long"):
        deep_care = "Check for and address any small mats before they grow"
    else:
        deep_care = "Focus on areas where hairballs may develop"

    if profile.age_category == "kitten":
        age_note = "Start with very brief, positive grooming experiences to build acceptance"
    elif profile.age_years > 10:
        age_note = "Senior cats may need help with grooming as flexibility decreases with age"
    else:
        age_note = "Respect your cat's tolerance limits and gradually build duration"

    if _breed_matches(breed_lc, ["persian", "exotic"]):
        face_note = "Facial folds need daily cleaning to prevent tear staining and infection"
    else:
        face_note = "Focus grooming on areas your cat has difficulty reaching"

    profile_block = _profile_block(
        profile, f"- **Coat Type:** {coat_type}", f"- **Grooming Needs:** {grooming_frequency}"
    )

    return f"""# {_pet_emoji(profile)} Personalized Grooming Plan for {breed} Cat

{profile_block}

## 📅 Daily Grooming Schedule

### 🌅 Morning (7:00-9:00 AM)
- Quick check of eyes for discharge - wipe if needed
- Brief brushing session if tolerated (1-2 minutes)
- Check ears for cleanliness
- Fresh water in clean bowl

### 🕛 Midday (12:00-2:00 PM)
- Gentle petting with grooming glove if accepted
- Monitor for any fur clumps or mats
- Check paws for debris or litter
- Observe grooming behavior

### 🌇 Afternoon (4:00-6:00 PM)
- Main grooming session (3-10 minutes depending on coat type)
{_sub_bullets(CAT_COAT_BRUSHING[coat_key])}
- Nail check - trim if needed (one or two at a time)
- Clean corner of eyes if needed

### 🌙 Evening (7:00-9:00 PM)
- Brief tooth brushing or dental treat if accepted
- Quick ear check
- Gentle bonding brush with very soft brush
- Check for any skin irritations

## 🛁 Weekly Grooming Tasks

### Bathing (if tolerated and needed)
- {bathing}
- Use cat-specific shampoo only
- Ensure room is warm and draft-free
- Quick, efficient process to minimize stress
- Thorough but gentle drying

### Deep Coat Care
- More thorough brushing session on weekend
- Check hard-to-reach areas thoroughly
- {deep_care}
- Petroleum jelly or hairball remedy if needed

### Nail and Paw Care
- Check and trim nail tips as needed
- Inspect paw pads for irritation
- Clean between toes if needed
- Monitor claw health and shape

### Ear Care
- Check for cleanliness and odor
- Gently clean with cat-specific ear cleaner if needed
- Watch for head shaking or ear scratching

## 🧰 Recommended Grooming Tools
{_bullets(CAT_COAT_TOOLS[coat_key])}

## 📝 Grooming Considerations
- {age_note}
- {coat_note}
- {face_note}{_grooming_notes(profile)}"""


def _other_grooming(profile: PetProfile) -> str:
    species = profile.species_label
    return f"""# {_pet_emoji(profile)} Personalized Grooming Plan for {profile.breed_label} {species}

{_other_profile_block(profile)}

## Important Note
This is a generalized grooming plan. {species}s have highly specialized grooming needs that vary significantly by species. Consult with a veterinarian who specializes in exotic pets for species-appropriate recommendations.

## 📅 Basic Grooming Schedule

### 🌅 Morning Habitat Check
- Ensure appropriate humidity and temperature
- Remove waste and soiled bedding
- Check water and food dishes for cleanliness
- Observe for any unusual shedding or skin issues

### 🌇 Weekly Habitat Maintenance
- Deep clean of appropriate habitat areas
- Check for any parasites or issues
- Refresh substrate as needed for species
- Clean and disinfect items in habitat

### 🌙 Monthly Health Scan
- Weight check if possible
- Examine skin, scales, feathers, or fur condition
- Check beak, nails, or claws as appropriate
- Monitor for normal shedding patterns

## 🧰 Species Considerations

### Handling for Grooming
- Research proper handling techniques for your specific species
- Many exotic pets should not be bathed or handled frequently
- Consider professional help for initial grooming guidance
- Never force grooming on a stressed animal

### Environmental Support
- Provide appropriate humidity for skin/scale/feather health
- Offer species-appropriate bathing options (dust baths, water features)
- Natural wearing surfaces for beak/nail/claw maintenance
- Appropriate substrate for natural cleaning behaviors

### When to Seek Help
- Any unusual skin conditions or excessive shedding
- Signs of parasites or irritation
- Overgrown nails, beak, or scales
- Changes in normal self-grooming behavior

## 📝 Grooming Considerations
- Many exotic pets handle their own grooming needs if provided with proper habitat
- Research specific grooming requirements for your particular species
- Improper grooming can cause serious stress or injury{_grooming_notes(profile)}"""


# ============================================================================
# Socialization
# ============================================================================

DOG_SOCIAL_TRAITS = [
    (("retriever", "labrador", "spaniel"),
     ("Typically friendly and social with people and dogs", "May be overly excited in greetings, jumping behavior")),
    (("shepherd", "doberman", "rottweiler"),
     ("Often reserved with strangers, loyal to family", "May be protective or cautious with new people/animals")),
    (("terrier",), ("Often independent and feisty", "May have high prey drive or reactivity to other animals")),
    (("hound",), ("Generally good with other dogs, may be distracted by scents",
                  "May be independent and less focused on human interaction")),
]
SMALL_DOG_SOCIAL_TRAITS = ("May be reserved with strangers, bonded closely with family",
                           "May be fearful of larger dogs or overwhelming situations")
DEFAULT_DOG_SOCIAL_TRAITS = ("Individual personality varies by dog", "Observe your dog's specific social preferences")

DOG_SOCIAL_TIPS = [
    (("retriever", "lab"), [
        "Channel friendly energy into structured greetings",
        "Use food rewards for calm greetings instead of excited ones",
        "Provide appropriate outlets for social needs through playgroups",
        "Practice focus work around high-value distractions",
    ]),
    (("shepherd", "doberman", "guard"), [
        "Focus on positive experiences with new people",
        "Allow observation time before interactions",
        "Don't force interactions - respect cautious nature",
        "Reward calm acceptance of strangers at a distance first",
    ]),
    (("terrier",), [
        "Extra focus on impulse control around small animals",
        "Structured interactions with other dogs",
        "Clear boundaries and consistent expectations",
        "Reward calm choices and self-control",
    ]),
    (("hound",), [
        "Practice recall with gradually increasing scent distractions",
        "Allow appropriate sniffing time on walks",
        "Work on focus and attention in stimulating environments",
        "Manage prey drive in appropriate contexts",
    ]),
]
SMALL_DOG_SOCIAL_TIPS = [
    "Protect from overwhelming dog interactions",
    "Create positive associations with larger dogs at safe distances",
    "Don't reinforce fearful behavior through coddling",
    "Build confidence through success in controlled situations",
]
DEFAULT_DOG_SOCIAL_TIPS = [
    "Observe your dog's individual social preferences",
    "Work with their natural tendencies rather than against them",
    "Build on existing social strengths",
    "Address specific challenges with gradual exposure",
]


def _dog_social(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()
    age = profile.age_years
    small_dog = _breed_matches(breed_lc, ["toy", "small"]) or profile.weight_units < 20

    traits = _pick_by_breed(breed_lc, DOG_SOCIAL_TRAITS, None)
    if traits is None:
        traits = SMALL_DOG_SOCIAL_TRAITS if small_dog else DEFAULT_DOG_SOCIAL_TRAITS
    characteristics, challenges = traits

    tips = _pick_by_breed(breed_lc, DOG_SOCIAL_TIPS, None)
    if tips is None:
        tips = SMALL_DOG_SOCIAL_TIPS if profile.weight_units < 20 else DEFAULT_DOG_SOCIAL_TIPS

    if age < 1:
        outing = ["New environment exposure (different streets, parks)",
                  "Controlled meeting with vaccinated, calm dogs",
                  "Brief exposure to various sounds, surfaces, people"]
        people_goal = "diverse types of people (different ages, appearances, etc.)"
        dog_goal = "Regular playdates with vaccinated, well-socialized dogs"
        environment_goal = "Expose to various environments, surfaces, sounds"
    else:
        if profile.age_category == "senior dog":
            outing = ["Quiet, positive social interactions",
                      "Gentle walking in familiar areas with occasional new elements",
                      "Calm visits with familiar dogs or people"]
        else:
            outing = ["Regular walking route with occasional new paths",
                      "Casual interactions with well-mannered dogs",
                      "Practice maintaining focus during distractions"]
        people_goal = "familiar and occasional new people"
        dog_goal = "Maintain positive relationships with familiar dogs"
        environment_goal = "Maintain comfort in everyday environments with occasional new experiences"

    if _breed_matches(breed_lc, ["shepherd", "guard"]):
        stranger_goal = "Work on accepting strangers with calm behavior"
    else:
        stranger_goal = "Reinforce friendly, appropriate greetings"

    if "terrier" in breed_lc or "reactive" in challenges:
        new_dog_goal = "Controlled distance work with trigger dogs"
    else:
        new_dog_goal = "Occasional new dog introductions in positive settings"

    if profile.activity_tier == "high":
        settle_goal = "Work on settling in stimulating environments"
    else:
        settle_goal = "Gradually increase environmental challenges"

    if age < 1:
        age_note = "Critical socialization window closing - focus on diverse, positive experiences"
    elif age > 7:
        age_note = "Senior dogs may be less tolerant - respect their social preferences"
    else:
        age_note = "Adult dogs can continue learning social skills with consistent practice"

    activity_note = {
        "low": "Low energy dogs may be overwhelmed by exuberant dogs - choose social partners carefully",
        "high": "Work on calm greetings and impulse control in exciting situations",
        "moderate": "Match socialization intensity to your dog's energy level",
    }[profile.activity_tier]

    profile_block = _profile_block(
        profile, f"- **Breed social traits:** {characteristics}", f"- **Potential challenges:** {challenges}"
    )

    return f"""# {_pet_emoji(profile)} Personalized Socialization Plan for {breed} Dog

{profile_block}

## 📅 Daily Socialization Schedule

### 🌅 Morning (6:00-8:00 AM)
- Calm greeting routine with household members
- Brief neighborhood walk with casual passing greetings
- Practice focus exercises with mild distractions
- Reward calm behavior around morning activities

### 🕛 Midday (12:00-2:00 PM)
- 10-minute interaction with familiar people/pets
- Practice polite greetings if visitors arrive
- Exposure to everyday household sounds and activities
- Reward relaxed behavior in different areas of home

### 🌇 Afternoon (4:00-6:00 PM)
- Main socialization outing (15-30 minutes)
{_sub_bullets(outing)}
- Practice obedience cues in gradually increasing distractions
- Reward calm behavior and appropriate social responses

### 🌙 Evening (7:00-9:00 PM)
- Calm indoor enrichment activity
- Gentle bonding time with household members
- Brief outdoor potty time with minimal social pressure
- Wind-down routine in consistent, quiet environment

## 🏆 Weekly Socialization Goals

### People Socialization
- Positive experiences with {people_goal}
- Practice greetings with appropriate jumping control
- {stranger_goal}
- Create positive associations with handling and restraint

### Dog Socialization
- {dog_goal}
- Practice appropriate greetings and play skills
- Read body language and respect when your dog needs space
- {new_dog_goal}

### Environmental Socialization
- {environment_goal}
- Practice calm behavior in increasingly distracting settings
- {settle_goal}
- Create positive associations with common stressors (vet, groomer)

## 🧠 Breed-Specific Socialization Tips
{_bullets(tips)}

## 📝 Socialization Considerations
- {age_note}
- {activity_note}
- Always monitor body language and respect when your dog needs a break{_social_notes(profile)}"""


CAT_SOCIAL_TRAITS = [
    (("siamese", "abyssinian", "burmese"),
     ("Typically social and interactive with people", "Often seeks interaction, may enjoy meeting new people")),
    (("persian", "himalayan", "exotic"),
     ("Often calm and reserved, may be selective with affection",
      "Prefers controlled, gentle introductions and quiet environments")),
    (("maine", "ragdoll", "norwegian"),
     ("Typically relaxed and tolerant, often people-oriented",
      "May be accepting of new people but needs proper introductions")),
    (("bengal", "savannah"),
     ("Often active and curious but may be selective with social bonds",
      "Needs engaging interaction and respect for boundaries")),
]
DEFAULT_CAT_SOCIAL_TRAITS = ("Individual personality varies significantly",
                             "Observe and respect your cat's unique social preferences")

CAT_SOCIAL_TIPS = [
    (("siamese", "abyssinian", "burmese"), [
        "Provide ample social interaction opportunities",
        "Engage with interactive toys and conversation",
        "Mental stimulation through training and play",
        "May enjoy meeting cat-savvy visitors",
    ]),
    (("persian", "himalayan"), [
        "Respect quiet nature and need for calm",
        "Approach slowly and speak softly",
        "Provide elevated retreats away from activity",
        "Allow to observe social situations before participating",
    ]),
    (("maine", "ragdoll"), [
        "Often more accepting of handling than average cats",
        "May enjoy gentle physical interaction",
        "Typically tolerant but still respect boundaries",
        "Often good with cat-savvy visitors",
    ]),
    (("bengal", "savannah"), [
        "Highly intelligent - provide mental challenges",
        "May form strong bonds but be selective",
        "Needs appropriate outlets for energy",
        "May be more dog-like in social behavior",
    ]),
]
DEFAULT_CAT_SOCIAL_TIPS = [
    "Observe your cat's individual social preferences",
    "Work with their natural tendencies",
    "Allow choice in all social interactions",
    "Build trust through consistency and respect",
]


def _cat_social(profile: PetProfile) -> str:
    breed = profile.breed_label
    breed_lc = breed.lower()
    age = profile.age_years
    characteristics, approach = _pick_by_breed(breed_lc, CAT_SOCIAL_TRAITS, DEFAULT_CAT_SOCIAL_TRAITS)

    if age < 1:
        session = ["Gentle handling of paws, ears, mouth", "Introduction to different textures and surfaces",
                   "Positive exposure to carriers, grooming tools"]
        visitor_goal = "Gradual introduction to visitors with treats and calm energy"
        environment_goal = "Regular exposure to household sounds, activities, carrier"
    else:
        if age > 10:
            session = ["Calm, predictable interaction on cat's terms",
                       "Comfortable resting places near family activity",
                       "Gentle affection without overwhelming"]
        else:
            session = ["Interactive play with favorite toys", "Practice handling if tolerated",
                       "Exposure to normal household activities"]
        if "social" in characteristics:
            visitor_goal = "Maintain positive visitor experiences with cat's preferred interaction style"
        else:
            visitor_goal = "Respect need for distance with visitors, provide hiding options"
        environment_goal = "Maintain comfort with normal household routines"

    if age < 1 and "seeks" in approach:
        animal_goal = "Carefully managed introductions to friendly, cat-savvy pets"
    else:
        animal_goal = "Respect established boundaries with other household pets"

    if "curious" in characteristics:
        exploration_goal = "Offer new exploration opportunities in safe contexts"
    else:
        exploration_goal = "Ensure access to familiar, secure resting places"

    if profile.age_category == "kitten":
        age_note = ("Critical socialization window - focus on positive experiences with handling, "
                    "carriers, and various people")
    elif age > 10:
        age_note = "Senior cats often prefer predictable, quiet social interactions"
    else:
        age_note = "Adult cats can continue building social confidence through positive experiences"

    activity_note = {
        "low": "Respect lower energy - shorter, calmer social interactions",
        "high": "Channel social energy through interactive play before handling",
        "moderate": "Match socialization intensity to your cat's energy level",
    }[profile.activity_tier]

    tips = _pick_by_breed(breed_lc, CAT_SOCIAL_TIPS, DEFAULT_CAT_SOCIAL_TIPS)

    profile_block = _profile_block(
        profile, f"- **Social characteristics:** {characteristics}", f"- **Social approach:** {approach}"
    )

    return f"""# {_pet_emoji(profile)} Personalized Socialization Plan for {breed} Cat

{profile_block}

## 📅 Daily Socialization Schedule

### 🌅 Morning (7:00-8:30 AM)
- Calm greeting ritual on cat's terms
- Respect choice to engage or observe
- Positive association with morning routine
- Interactive play if cat is receptive

### 🕛 Midday (12:00-2:00 PM)
- Quiet presence nearby during cat's rest period
- Offer optional interaction without pressure
- Fresh enrichment item to explore
- Respect choice for solitude

### 🌇 Afternoon (4:00-6:00 PM)
- Main socialization session (10-15 minutes)
{_sub_bullets(session)}
- Create positive associations with various situations
- Reward calm acceptance of handling

### 🌙 Evening (7:00-9:00 PM)
- Quiet bonding time in relaxed atmosphere
- Optional lap time or nearby resting
- Last play session if cat is active in evening
- Consistent bedtime routine

## 🏆 Weekly Socialization Goals

### People Socialization
- Positive experiences with household members
- {visitor_goal}
- Allow interaction on cat's terms without forcing
- Create positive associations with handling for medical/grooming needs

### Other Animal Socialization (if applicable)
- Maintain existing positive relationships
- Supervised interaction with clear escape routes
- {animal_goal}
- Never force interaction between animals

### Environmental Socialization
- {environment_goal}
- Create positive associations with travel carrier
- Provide safe observation points for household activity
- {exploration_goal}

## 🧠 Breed-Specific Socialization Tips
{_bullets(tips)}

## 📝 Socialization Considerations
- {age_note}
- {activity_note}
- Always provide hiding places and escape routes during social situations{_social_notes(profile)}"""


def _other_social(profile: PetProfile) -> str:
    species = profile.species_label
    return f"""# {_pet_emoji(profile)} Personalized Socialization Plan for {profile.breed_label} {species}

{_other_profile_block(profile)}

## Important Note
This is a generalized socialization plan. {species}s have highly specialized social needs that vary significantly by species. Many exotic pets do NOT benefit from the same socialization approaches used for dogs and cats. Consult with a veterinarian who specializes in exotic pets for species-appropriate recommendations.

## 📅 Socialization Considerations

### Understanding Natural Social Behavior
- Research whether your species is naturally solitary or social
- Respect species-typical social groupings
- Understand normal communication signals
- Never force interaction on naturally solitary species

### Human Interaction Guidelines
- Approach at or below the animal's eye level
- Move slowly and speak softly if interaction is appropriate
- Watch for stress signals and respect when the animal needs space
- Create positive associations through appropriate species rewards

### Environmental Socialization
- Gradually introduce to normal household sounds at safe distances
- Provide appropriate hiding places and secure retreats
- Create positive associations with necessary handling equipment
- Practice calm, brief handling sessions if appropriate for species

## 🧠 Species-Specific Considerations
- Many exotic species are naturally solitary and prefer minimal handling
- Some species may bond with humans but still need specific interaction approaches
- Others may be social with their own kind but stressed by human interaction
- Research your specific species' natural social structure

## 📝 Special Recommendations
- Focus on creating positive associations rather than forced handling
- Provide species-appropriate environmental enrichment
- Respect natural behaviors and social needs
- For social species, consider appropriate companionship of same species{_social_notes(profile)}"""


# ============================================================================
# Generic (unrecognized category)
# ============================================================================

def render_generic_plan(profile: PetProfile, plan_type: str) -> str:
    """Plan for a category without a template: echoes the profile with general guidance only."""
    category = str(plan_type).strip()
    species = profile.species_label
    notes = profile.notes if profile.has_notes else f"No specific {category} concerns noted"

    return f"""# {GENERIC_PLAN_EMOJI} {category} Care Plan for {profile.breed_label} {species}

## Pet Profile
- **Species:** {species}
- **Breed:** {profile.breed_label}
- **Age:** {profile.age_years} years
- **Weight:** {profile.weight_units} lbs
- **Size:** {profile.size.label}
{_activity_line(profile)}

## 📅 General Daily Routine
- Keep feeding, exercise, and rest at consistent times each day
- Provide fresh water and a clean resting area
- Observe appetite, energy, and behavior for changes
- Schedule regular veterinary checkups

## 📌 Special Considerations
- {notes}
- Please research the specific {category} needs of your {species}"""


# ============================================================================
# Dispatch
# ============================================================================

Renderer = Callable[[PetProfile], str]

CATEGORY_RENDERERS: Dict[PlanCategory, Dict[Species, Renderer]] = {
    PlanCategory.NUTRITION: {Species.DOG: _dog_nutrition, Species.CAT: _cat_nutrition, Species.OTHER: _other_nutrition},
    PlanCategory.TRAINING: {Species.DOG: _dog_training, Species.CAT: _cat_training, Species.OTHER: _other_training},
    PlanCategory.HEALTH: {Species.DOG: _dog_health, Species.CAT: _cat_health, Species.OTHER: _other_health},
    PlanCategory.ACTIVITIES: {Species.DOG: _dog_activities, Species.CAT: _cat_activities,
                              Species.OTHER: _other_activities},
    PlanCategory.GROOMING: {Species.DOG: _dog_grooming, Species.CAT: _cat_grooming, Species.OTHER: _other_grooming},
    PlanCategory.SOCIAL: {Species.DOG: _dog_social, Species.CAT: _cat_social, Species.OTHER: _other_social},
}


def render_fallback_plan(profile: PetProfile, plan_type: Optional[str] = None) -> str:
    """
    Render the deterministic fallback plan for a profile.

    A missing/empty plan_type renders nutrition; an unrecognized one renders the generic plan.
    """
    if plan_type is None or not str(plan_type).strip():
        category = PlanCategory.NUTRITION
    else:
        category = PlanCategory.parse(str(plan_type).strip())

    if category is None:
        logger.info(f"📋 No template for plan type '{plan_type}', rendering generic plan")
        return render_generic_plan(profile, plan_type)

    renderer = CATEGORY_RENDERERS[category][profile.species]
    return renderer(profile)
