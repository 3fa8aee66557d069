"""
Exercise catalog.

Two pools, one per equipment location. Catalog order matters: the training
builder walks each pool front to back, so the first entries of a focus are the
ones a session gets first.

Tags narrow who an exercise is offered to:
- goal_tags: only for those goals
- health_tags: only if the user has at least one of those conditions
- intensity: "intermediate" is hidden from sedentary users, "advanced" is
  reserved for the high activity level
"""

from typing import List

from ..constants import (
    EquipmentLocation as Loc,
    ExerciseIntensity as Lvl,
    Focus,
    Goal,
    HealthCondition,
)
from ..models import WorkoutExercise


HOME_EXERCISES: List[WorkoutExercise] = [
    # --- upper / push / pull ---
    WorkoutExercise(
        id="home-incline-pushup", name="Incline push-up", equipment="Bench",
        focus=Focus.PUSH, sets=3, rep_range="8-12", rest_seconds=60,
        instructions="Hands on the bench edge, body in one line, lower the chest to the bench.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-band-row", name="Band seated row", equipment="Resistance band",
        focus=Focus.PULL, sets=3, rep_range="12-15", rest_seconds=60,
        instructions="Loop the band around your feet, pull elbows back and squeeze the shoulder blades.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-db-shoulder-press", name="Seated dumbbell shoulder press", equipment="Dumbbells",
        focus=Focus.UPPER, sets=3, rep_range="8-12", tempo="2-1-1", rest_seconds=75,
        instructions="Sit tall, press the dumbbells overhead without arching the lower back.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-db-floor-press", name="Dumbbell floor press", equipment="Dumbbells",
        focus=Focus.PUSH, sets=4, rep_range="8-10", tempo="3-1-1", rest_seconds=90,
        instructions="Lie on the floor, lower until the triceps touch down, press back up.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="home-band-pull-apart", name="Band pull-apart", equipment="Resistance band",
        focus=Focus.PULL, sets=3, rep_range="15-20", rest_seconds=45,
        instructions="Arms straight at shoulder height, pull the band apart until it touches the chest.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-db-bent-row", name="Dumbbell bent-over row", equipment="Dumbbells",
        focus=Focus.PULL, sets=4, rep_range="8-12", rest_seconds=75,
        instructions="Hinge at the hips, flat back, row the dumbbells to the lower ribs.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="home-pike-pushup", name="Pike push-up", equipment="Bodyweight",
        focus=Focus.PUSH, sets=3, rep_range="6-10", rest_seconds=90,
        instructions="Hips high, lower the head between the hands and press back up.",
        intensity=Lvl.ADVANCED,
    ),
    WorkoutExercise(
        id="home-curl-to-press", name="Dumbbell curl to press", equipment="Dumbbells",
        focus=Focus.UPPER, sets=3, rep_range="10-12", rest_seconds=60,
        instructions="Curl the dumbbells to the shoulders, then press overhead in one flow.",
    ),
    # --- lower ---
    WorkoutExercise(
        id="home-goblet-squat", name="Goblet squat", equipment="Dumbbell",
        focus=Focus.LOWER, sets=3, rep_range="10-12", tempo="3-1-1", rest_seconds=75,
        instructions="Hold the dumbbell at the chest, sit between the heels, knees track the toes.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-glute-bridge", name="Glute bridge", equipment="Bodyweight",
        focus=Focus.LOWER, sets=3, rep_range="12-15", rest_seconds=45,
        instructions="Drive through the heels, squeeze the glutes at the top for two seconds.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-reverse-lunge", name="Reverse lunge", equipment="Dumbbells",
        focus=Focus.LOWER, sets=3, rep_range="8-10 / leg", rest_seconds=75,
        instructions="Step back, lower the back knee toward the floor, push through the front heel.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="home-db-rdl", name="Dumbbell Romanian deadlift", equipment="Dumbbells",
        focus=Focus.LOWER, sets=3, rep_range="10-12", tempo="3-0-1", rest_seconds=75,
        instructions="Soft knees, push the hips back, keep the dumbbells close to the legs.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-step-up", name="Bench step-up", equipment="Bench",
        focus=Focus.LOWER, sets=3, rep_range="10 / leg", rest_seconds=60,
        instructions="Whole foot on the bench, stand up without pushing off the back leg.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-bulgarian-split-squat", name="Bulgarian split squat", equipment="Bench",
        focus=Focus.LOWER, sets=3, rep_range="8 / leg", rest_seconds=90,
        instructions="Back foot on the bench, lower straight down, front knee stays stable.",
        intensity=Lvl.ADVANCED,
    ),
    WorkoutExercise(
        id="home-banded-lateral-walk", name="Banded lateral walk", equipment="Mini band",
        focus=Focus.LOWER, sets=3, rep_range="12 steps / side", rest_seconds=45,
        instructions="Band above the knees, half squat, step sideways keeping tension on the band.",
        preferred_location=Loc.HOME,
    ),
    WorkoutExercise(
        id="home-supported-squat", name="Chair-supported squat", equipment="Chair",
        focus=Focus.LOWER, sets=3, rep_range="10-12", rest_seconds=60,
        instructions="Lightly hold the chair back, sit down slowly and stand up with control.",
        health_tags=(HealthCondition.HASHIMOTO,), intensity=Lvl.BEGINNER,
    ),
    # --- full body ---
    WorkoutExercise(
        id="home-squat-to-press", name="Squat to press", equipment="Dumbbells",
        focus=Focus.FULL, sets=3, rep_range="10-12", rest_seconds=75,
        instructions="Squat with dumbbells at the shoulders, press overhead as you stand.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-db-thruster", name="Dumbbell thruster", equipment="Dumbbells",
        focus=Focus.FULL, sets=4, rep_range="10", rest_seconds=60,
        instructions="Explosive squat into an overhead press, keep a steady rhythm.",
        goal_tags=(Goal.LOSE,), intensity=Lvl.INTERMEDIATE,
    ),
    # --- core ---
    WorkoutExercise(
        id="home-dead-bug", name="Dead bug", equipment="Bodyweight",
        focus=Focus.CORE, sets=3, rep_range="8 / side", rest_seconds=45,
        instructions="Lower back pressed into the floor, extend the opposite arm and leg slowly.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-forearm-plank", name="Forearm plank", equipment="Bodyweight",
        focus=Focus.CORE, sets=3, rep_range="30-45 s", rest_seconds=45,
        instructions="Elbows under the shoulders, ribs down, breathe steadily.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="home-bird-dog", name="Bird dog", equipment="Bodyweight",
        focus=Focus.CORE, sets=3, rep_range="10 / side", rest_seconds=30,
        instructions="On all fours, reach the opposite arm and leg long without rotating the hips.",
    ),
    WorkoutExercise(
        id="home-side-plank", name="Side plank", equipment="Bodyweight",
        focus=Focus.CORE, sets=3, rep_range="20-30 s / side", rest_seconds=45,
        instructions="Stack the feet, lift the hips and hold a straight line.",
        intensity=Lvl.INTERMEDIATE,
    ),
    # --- mobility ---
    WorkoutExercise(
        id="home-cat-cow", name="Cat-cow", equipment="Mat",
        focus=Focus.MOBILITY, sets=2, rep_range="10 slow reps", rest_seconds=15,
        instructions="Move through the whole spine, exhale as you round, inhale as you arch.",
    ),
    WorkoutExercise(
        id="home-hip-flexor-stretch", name="Half-kneeling hip flexor stretch", equipment="Mat",
        focus=Focus.MOBILITY, sets=2, rep_range="40 s / side", rest_seconds=15,
        instructions="Tuck the pelvis, squeeze the back glute and shift forward gently.",
    ),
    # --- cardio ---
    WorkoutExercise(
        id="home-low-impact-intervals", name="Low-impact march intervals", equipment="Bodyweight",
        focus=Focus.CARDIO, sets=6, rep_range="40 s on / 20 s off", rest_seconds=20,
        instructions="High-knee march with arm drive, keep a pace you can talk through.",
        health_tags=(HealthCondition.IR, HealthCondition.PCOS),
    ),
    WorkoutExercise(
        id="home-jumping-jacks", name="Jumping jacks", equipment="Bodyweight",
        focus=Focus.CARDIO, sets=5, rep_range="45 s", rest_seconds=30,
        instructions="Land softly on the balls of the feet, keep the rhythm steady.",
        goal_tags=(Goal.LOSE, Goal.MAINTAIN), intensity=Lvl.INTERMEDIATE,
    ),
]


GYM_EXERCISES: List[WorkoutExercise] = [
    # --- push ---
    WorkoutExercise(
        id="gym-db-bench-press", name="Dumbbell bench press", equipment="Dumbbells + bench",
        focus=Focus.PUSH, sets=3, rep_range="8-12", tempo="2-1-1", rest_seconds=90,
        instructions="Shoulder blades pinned back, lower the dumbbells to chest level and press.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-machine-chest-press", name="Machine chest press", equipment="Chest press machine",
        focus=Focus.PUSH, sets=3, rep_range="10-12", rest_seconds=75,
        instructions="Set the handles at mid-chest, press without locking the elbows.",
        preferred_location=Loc.GYM,
    ),
    WorkoutExercise(
        id="gym-cable-fly", name="Cable fly", equipment="Cable station",
        focus=Focus.PUSH, sets=3, rep_range="12-15", rest_seconds=60,
        instructions="Slight bend in the elbows, hug the arms together in front of the chest.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="gym-barbell-bench-press", name="Barbell bench press", equipment="Barbell + bench",
        focus=Focus.PUSH, sets=4, rep_range="5-8", rest_seconds=120,
        instructions="Feet planted, bar to the lower chest, press in a slight arc.",
        intensity=Lvl.ADVANCED,
    ),
    WorkoutExercise(
        id="gym-db-overhead-press", name="Standing dumbbell overhead press", equipment="Dumbbells",
        focus=Focus.UPPER, sets=3, rep_range="8-10", rest_seconds=90,
        instructions="Brace the core and glutes, press overhead and finish with biceps by the ears.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-lateral-raise", name="Dumbbell lateral raise", equipment="Dumbbells",
        focus=Focus.UPPER, sets=3, rep_range="12-15", rest_seconds=45,
        instructions="Lead with the elbows, raise to shoulder height, lower slowly.",
        intensity=Lvl.BEGINNER,
    ),
    # --- pull ---
    WorkoutExercise(
        id="gym-lat-pulldown", name="Lat pulldown", equipment="Lat pulldown machine",
        focus=Focus.PULL, sets=3, rep_range="10-12", rest_seconds=75,
        instructions="Chest up, pull the bar to the upper chest, control the way up.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-seated-cable-row", name="Seated cable row", equipment="Cable station",
        focus=Focus.PULL, sets=3, rep_range="10-12", rest_seconds=75,
        instructions="Sit tall, pull the handle to the navel, squeeze the shoulder blades.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-assisted-pullup", name="Assisted pull-up", equipment="Assisted pull-up machine",
        focus=Focus.PULL, sets=3, rep_range="6-10", rest_seconds=90,
        instructions="Full hang at the bottom, pull until the chin clears the bar.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="gym-face-pull", name="Face pull", equipment="Cable + rope",
        focus=Focus.PULL, sets=3, rep_range="12-15", rest_seconds=45,
        instructions="Pull the rope toward the forehead, elbows high, rotate the hands out.",
        preferred_location=Loc.GYM,
    ),
    WorkoutExercise(
        id="gym-barbell-row", name="Barbell row", equipment="Barbell",
        focus=Focus.PULL, sets=4, rep_range="6-8", rest_seconds=120,
        instructions="Hinge to about 45 degrees, row the bar to the lower ribs.",
        intensity=Lvl.ADVANCED,
    ),
    # --- lower ---
    WorkoutExercise(
        id="gym-leg-press", name="Leg press", equipment="Leg press machine",
        focus=Focus.LOWER, sets=3, rep_range="10-12", tempo="3-1-1", rest_seconds=90,
        instructions="Feet hip-width on the platform, lower until the hips stay down, press through the heels.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-goblet-squat", name="Goblet squat", equipment="Kettlebell",
        focus=Focus.LOWER, sets=3, rep_range="10-12", rest_seconds=75,
        instructions="Kettlebell at the chest, sit deep, elbows inside the knees.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-hip-thrust", name="Barbell hip thrust", equipment="Barbell + bench",
        focus=Focus.LOWER, sets=4, rep_range="8-12", rest_seconds=90,
        instructions="Upper back on the bench, chin tucked, drive the hips up and pause.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="gym-romanian-deadlift", name="Romanian deadlift", equipment="Barbell",
        focus=Focus.LOWER, sets=3, rep_range="8-10", tempo="3-0-1", rest_seconds=90,
        instructions="Bar close to the legs, hips back until the hamstrings stretch, stand tall.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="gym-lying-leg-curl", name="Lying leg curl", equipment="Leg curl machine",
        focus=Focus.LOWER, sets=3, rep_range="10-12", rest_seconds=60,
        instructions="Hips pressed into the pad, curl up fast and lower in three seconds.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-back-squat", name="Barbell back squat", equipment="Squat rack",
        focus=Focus.LOWER, sets=4, rep_range="5-8", rest_seconds=150,
        instructions="Bar on the upper back, brace, squat to depth and drive up.",
        intensity=Lvl.ADVANCED,
    ),
    WorkoutExercise(
        id="gym-cable-kickback", name="Cable glute kickback", equipment="Cable + ankle strap",
        focus=Focus.LOWER, sets=3, rep_range="12-15 / leg", rest_seconds=45,
        instructions="Slight forward lean, kick back without arching the lower back.",
        preferred_location=Loc.GYM,
    ),
    WorkoutExercise(
        id="gym-hip-abduction", name="Hip abduction machine", equipment="Abductor machine",
        focus=Focus.LOWER, sets=3, rep_range="15-20", rest_seconds=45,
        instructions="Sit slightly forward, push the pads out and return slowly.",
        intensity=Lvl.BEGINNER,
    ),
    # --- full body ---
    WorkoutExercise(
        id="gym-kettlebell-deadlift", name="Kettlebell deadlift", equipment="Kettlebell",
        focus=Focus.FULL, sets=3, rep_range="10-12", rest_seconds=75,
        instructions="Kettlebell between the feet, hinge, grip and stand up with a neutral spine.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-db-thruster", name="Dumbbell thruster", equipment="Dumbbells",
        focus=Focus.FULL, sets=4, rep_range="10", rest_seconds=60,
        instructions="Front squat into an overhead press in one continuous motion.",
        goal_tags=(Goal.LOSE,), intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="gym-trap-bar-deadlift", name="Trap bar deadlift", equipment="Trap bar",
        focus=Focus.FULL, sets=4, rep_range="5-8", rest_seconds=120,
        instructions="Stand in the middle of the bar, push the floor away, lock out with the glutes.",
        goal_tags=(Goal.GAIN, Goal.MAINTAIN), intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="gym-sled-push", name="Sled push", equipment="Sled",
        focus=Focus.FULL, sets=5, rep_range="20 m", rest_seconds=90,
        instructions="Low body angle, short powerful steps, arms locked.",
        intensity=Lvl.ADVANCED,
    ),
    # --- core ---
    WorkoutExercise(
        id="gym-pallof-press", name="Pallof press", equipment="Cable station",
        focus=Focus.CORE, sets=3, rep_range="10 / side", rest_seconds=45,
        instructions="Stand side-on to the cable, press the handle out and resist the rotation.",
        intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-cable-crunch", name="Kneeling cable crunch", equipment="Cable + rope",
        focus=Focus.CORE, sets=3, rep_range="12-15", rest_seconds=45,
        instructions="Hips still, curl the ribs toward the pelvis.",
        intensity=Lvl.INTERMEDIATE,
    ),
    WorkoutExercise(
        id="gym-dead-bug", name="Dead bug", equipment="Mat",
        focus=Focus.CORE, sets=3, rep_range="8 / side", rest_seconds=45,
        instructions="Lower back glued to the mat, move the opposite arm and leg slowly.",
    ),
    # --- mobility ---
    WorkoutExercise(
        id="gym-foam-roll", name="Foam rolling: quads and upper back", equipment="Foam roller",
        focus=Focus.MOBILITY, sets=1, rep_range="5 min", rest_seconds=0,
        instructions="Roll slowly and pause for a few breaths on tender spots.",
    ),
    WorkoutExercise(
        id="gym-90-90-switch", name="90/90 hip switch", equipment="Mat",
        focus=Focus.MOBILITY, sets=2, rep_range="8 / side", rest_seconds=15,
        instructions="Sit tall, rotate both knees to the other side without using the hands.",
    ),
    # --- cardio ---
    WorkoutExercise(
        id="gym-incline-walk", name="Incline treadmill walk", equipment="Treadmill",
        focus=Focus.CARDIO, sets=1, rep_range="15-20 min", rest_seconds=0,
        instructions="Incline 8-12 %, brisk pace, do not hold the handrails.",
        health_tags=(HealthCondition.IR, HealthCondition.PCOS), intensity=Lvl.BEGINNER,
    ),
    WorkoutExercise(
        id="gym-rower-intervals", name="Rower intervals", equipment="Rowing machine",
        focus=Focus.CARDIO, sets=6, rep_range="250 m", rest_seconds=60,
        instructions="Legs, then hips, then arms; reverse the order on the way back.",
        intensity=Lvl.INTERMEDIATE,
    ),
]
