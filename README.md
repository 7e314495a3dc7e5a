# petshelter

petshelter is a small interactive console tool for keeping pet shelter records. It tracks each animal's name, ID, colour, type and days in the shelter. Dogs also have a breed and a hair length. Cats also have a breed and a coat pattern. Any animal can have an interested adopter with a name and a phone number.

## Installation

```
pip install .
```

To install with the test requirements:

```
pip install ".[test]"
```

## Usage

Start the program:

```
petshelter
```

The program first asks whether you want to use it. Any answer other than `yes` ends it. It then asks whether to load an existing shelter file:

- `yes` prompts for a file name.
- `no` starts with an empty shelter.
- Any other answer exits.

After that, a menu appears:

1. Print Shelter: list every animal with its details and its adopter, if it has one.
2. Add Pet: enter a `Dog`, a `Cat` or any other type. You can then add an interested adopter.
3. Find Oldest Resident: show the animal with the most days in the shelter. On a tie, the animal listed first is shown.
4. Save Shelter: write the records to a file. Saving adds one day to every animal's days in the shelter.
5. Exit Program

Input is read word by word, separated by whitespace, so every answer must be a single word. If the ID or the days in the shelter is not a whole number, the pet is not added. The program ends quietly when input runs out.

## File format

Each line holds one comma-separated record:

```
Dog,Rex,1,12,Brown,Canine,Labrador,Short,Alex,ext-100
Cat,Misty,2,30,Grey,Feline,Siamese,Tabby,None,None
Pet,Kiwi,3,4,Green,Bird
```

The fields are, in order:

- the kind of record: `Dog`, `Cat`, or anything else for a plain pet;
- the name, ID, days in the shelter, colour and animal type;
- for dogs, the breed and hair length; for cats, the breed and coat pattern;
- optionally, the adopter's name and phone number.

An adopter is recorded only when both the name and the phone number are present and neither is `None`. Missing trailing fields are read as empty.

The ID and the days in the shelter must each start with a whole number. If they do not, loading the file fails.

## As a library

```python
from petshelter.models import Dog, InterestedAdopter
from petshelter.storage import load_shelter, save_shelter, parse_line, format_line
from petshelter.shelter import find_oldest, format_shelter

pets = load_shelter("shelter.txt")          # OSError / ValueError on failure
pets.append(Dog(name="Rex", id=7, days_in_shelter=3, color="Brown",
                animal_type="Canine", breed="Labrador", hair_length="Short",
                adopter=InterestedAdopter("Alex", "ext-100")))
print(format_shelter(pets))
print(find_oldest(pets).name)               # ValueError if there are no pets
save_shelter("shelter.txt", pets)           # adds one day to each pet
```

The classes are:

- `Pet`, with the fields `name`, `id`, `days_in_shelter`, `color`, `animal_type` and `adopter`.
- `Cat`, which adds `breed` and `coat_pattern`.
- `Dog`, which adds `breed` and `hair_length`.

Each class has `info()`, `increment_days_in_shelter()` and `clear_adopter()`.

## Limitations

- Saved files do not include adopter details. Reloading a saved file loses any interested adopters.
- Pets cannot be removed or edited once they have been added.